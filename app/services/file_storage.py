# app/services/file_storage.py
import time
import shutil
import logging
from pathlib import Path
from typing import Optional, Tuple

from fastapi import Depends, UploadFile, HTTPException

from app.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

AVATAR_URL_PREFIX = "/uploads/avatars"


class AvatarStorageService:
    """Stores user avatar images under <upload_dir>/avatars and serves them by URL path"""

    def __init__(self, upload_dir: str = "uploads", max_file_size: int = 2 * 1024 * 1024):  # 2MB default
        self.upload_dir = Path(upload_dir)
        self.avatar_dir = self.upload_dir / "avatars"
        self.max_file_size = max_file_size

        # Create avatar directory if it doesn't exist
        self.avatar_dir.mkdir(parents=True, exist_ok=True)

    def validate_file(self, file: UploadFile) -> Tuple[bool, str]:
        """
        Validate an uploaded avatar

        Args:
            file: FastAPI UploadFile object

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not file.filename:
            return False, "File must have a filename"

        if not (file.content_type or "").startswith("image/"):
            return False, "Only image files are allowed!"

        if file.size is not None and file.size > self.max_file_size:
            return False, self._size_message()

        return True, ""

    def _size_message(self) -> str:
        return f"File size exceeds maximum allowed size of {self.max_file_size / (1024*1024):.1f}MB"

    def generate_filename(self, user_id: int, original_filename: str) -> str:
        """<user id>-<epoch millis><original extension>"""
        file_ext = Path(original_filename).suffix.lower()
        return f"{user_id}-{int(time.time() * 1000)}{file_ext}"

    def save_avatar(self, file: UploadFile, user_id: int) -> str:
        """
        Save an avatar to disk

        Returns:
            URL path of the stored avatar
        """
        is_valid, error_msg = self.validate_file(file)
        if not is_valid:
            raise HTTPException(status_code=400, detail=error_msg)

        filename = self.generate_filename(user_id, file.filename)
        file_path = self.avatar_dir / filename

        try:
            with open(file_path, "wb") as buffer:
                shutil.copyfileobj(file.file, buffer)
        except OSError as e:
            logger.error(f"Error saving avatar {file.filename}: {str(e)}")
            raise HTTPException(status_code=500, detail=f"Error saving file: {str(e)}")

        # Double-check file size after saving
        if file_path.stat().st_size > self.max_file_size:
            file_path.unlink()
            raise HTTPException(status_code=400, detail=self._size_message())

        logger.info(f"Avatar saved successfully: {file_path}")
        return f"{AVATAR_URL_PREFIX}/{filename}"

    def delete_avatar(self, avatar_url: Optional[str]) -> bool:
        """
        Delete a previously stored avatar given its URL path

        Returns:
            True if a file was deleted, False otherwise
        """
        if not avatar_url:
            return False

        # Only the basename is trusted; the URL never selects another directory
        path = self.avatar_dir / Path(avatar_url).name
        if path.exists():
            path.unlink()
            logger.info(f"Avatar deleted successfully: {path}")
            return True

        logger.warning(f"Avatar not found for deletion: {path}")
        return False


def get_avatar_storage(settings: Settings = Depends(get_settings)) -> AvatarStorageService:
    return AvatarStorageService(upload_dir=settings.UPLOAD_DIR, max_file_size=settings.AVATAR_MAX_SIZE)
