import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

import app.models  # noqa: F401  registers every table on Base.metadata
from app.config.settings import get_settings
from app.routers import auth, user, team, project, task, tags, task_statuses, events
from app.schemas.common import ValidationErrorOut, ValidationIssue

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Route registration
app.include_router(auth.router, prefix="/api", tags=["Authentication"])
app.include_router(user.router, prefix="/api/users", tags=["Users"])
app.include_router(team.router, prefix="/api/teams", tags=["Teams"])
app.include_router(project.router, prefix="/api/projects", tags=["Projects"])
app.include_router(task_statuses.router, prefix="/api/task-statuses", tags=["Task statuses"])
app.include_router(task.router, prefix="/api/tasks", tags=["Tasks"])
app.include_router(tags.router, prefix="/api/tags", tags=["Tags"])
app.include_router(events.router, prefix="/api/events", tags=["Events"])

# Uploaded avatars are served as static files
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unmatched routes come through here with Starlette's default detail
    if exc.status_code == 404 and exc.detail == "Not Found":
        content = {"error": "Endpoint not found"}
    elif isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    issues = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        issues.append(ValidationIssue(
            field=".".join(loc) or "body",
            msg=error.get("msg", "Invalid value"),
            type=error.get("type"),
        ))
    return JSONResponse(status_code=400, content=ValidationErrorOut(errors=issues).model_dump())


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal server error", "message": str(exc)})


@app.get("/api")
def read_root():
    return {
        "message": settings.APP_NAME,
        "endpoints": {
            "auth": ["/api/auth/register", "/api/auth/login", "/api/change-password", "/api/profile"],
            "users": "/api/users",
            "teams": "/api/teams",
            "projects": "/api/projects",
            "taskStatuses": "/api/task-statuses",
            "tasks": "/api/tasks",
            "tags": "/api/tags",
            "events": "/api/events",
        },
    }


@app.get("/health")
def health():
    return {"status": "ok"}
