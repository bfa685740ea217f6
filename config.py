#!/usr/bin/env python3
import os


def env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() == "true"


class Config:
    PORT = int(os.environ.get("PORT", 5000))

    # Masked audit log of password checks; off unless ENABLE_LOG=true
    ENABLE_LOG = env_flag("ENABLE_LOG")
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///password_checks.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")


class TestingConfig(Config):
    TESTING = True
    ENABLE_LOG = False
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
