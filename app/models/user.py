# app/models/user.py
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    avatar_url = Column(String(255), nullable=True)
    avatar_data = Column(Text, nullable=True)  # base64 avatar sent by the profile form
    role = Column(String(20), nullable=False, default="employee")  # manager, employee or admin
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    created_teams = relationship("Team", back_populates="creator", passive_deletes="all")
    created_tasks = relationship("Task", back_populates="creator", passive_deletes="all")
    events = relationship("Event", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    settings = relationship(
        "UserSettings", back_populates="user", uselist=False, cascade="all, delete-orphan", passive_deletes=True
    )

class UserSettings(Base):
    __tablename__ = "user_settings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    dark_mode = Column(Boolean, nullable=False, default=True)
    high_contrast = Column(Boolean, nullable=False, default=False)
    language = Column(String(10), nullable=False, default="ru")
    font_size = Column(Integer, nullable=False, default=16)
    voice_assistant = Column(Boolean, nullable=False, default=False)
    accent_color = Column(String(20), nullable=False, default="#9A48EA")
    date_format = Column(String(20), nullable=False, default="DD.MM.YYYY")
    timezone = Column(String(50), nullable=False, default="Europe/Moscow")
    two_factor_auth = Column(Boolean, nullable=False, default=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="settings")
