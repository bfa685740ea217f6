"""
tests/conftest.py
=================
Shared pytest fixtures — Flask app on in-memory SQLite, no real DB touched.
"""
import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

from app import create_app
from config import TestingConfig
from models import db


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logging_app():
    """App with the masked check log switched on."""
    app = create_app(TestingConfig, {"ENABLE_LOG": True})
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture
def logging_client(logging_app):
    return logging_app.test_client()
