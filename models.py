#!/usr/bin/env python3
from flask_sqlalchemy import SQLAlchemy
from datetime import datetime, timezone

db = SQLAlchemy()


def utcnow():
    return datetime.now(timezone.utc)


def mask_password(pw) -> str:
    """Keep the first and last character, replace the rest with '*'."""
    if not pw or not isinstance(pw, str):
        return ""
    if len(pw) <= 2:
        return "*" * len(pw)
    return pw[0] + "*" * (len(pw) - 2) + pw[-1]


class PasswordCheck(db.Model):
    __tablename__ = "pw_checks"

    id = db.Column(db.Integer, primary_key=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    masked = db.Column(db.Text, nullable=False, default="")
    score = db.Column(db.Integer, nullable=False)
    label = db.Column(db.String(32), nullable=False)

    @classmethod
    def from_result(cls, password, result):
        return cls(masked=mask_password(password), score=result.score, label=result.label)

