#!/usr/bin/env python3
"""
Password Analyzer API.

POST /api/check-password    {"password": str} -> {"success": true, "result": {...}}
POST /api/generate-password {"length": int}   -> {"success": true, "password": str}

With ENABLE_LOG=true each check is recorded in the pw_checks table with the
password masked.
"""
from flask import Flask, jsonify, request
from flask_cors import CORS
from sqlalchemy.exc import SQLAlchemyError

from config import Config
from models import db, mask_password, PasswordCheck
from passwordchecker import InvalidLengthError, evaluate, generate, parse_length


def create_app(config_object=Config, test_config=None):
    app = Flask(__name__)
    app.config.from_object(config_object)
    if test_config is not None:
        app.config.from_mapping(test_config)

    CORS(app, origins=app.config["CORS_ORIGINS"])
    db.init_app(app)

    if app.config["ENABLE_LOG"]:
        try:
            with app.app_context():
                db.create_all()
        except SQLAlchemyError as e:
            app.logger.error("Check log unavailable, logging disabled: %s", e)
            app.config["ENABLE_LOG"] = False

    if app.config["ENABLE_LOG"]:
        app.logger.info("Check logging enabled (%s)", app.config["SQLALCHEMY_DATABASE_URI"])
    else:
        app.logger.info("Check logging disabled")

    register_routes(app)
    return app


def json_body():
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def log_check(app, password, result):
    try:
        db.session.add(PasswordCheck.from_result(password, result))
        db.session.commit()
    except Exception:
        db.session.rollback()
        app.logger.exception("Log write failed")


def register_routes(app):

    @app.route("/api/check-password", methods=["POST"])
    def check_password():
        password = json_body().get("password")
        outcome = evaluate(password)
        if outcome.short_circuit:
            app.logger.debug("Checked %s -> %s", mask_password(password), outcome.label)
        else:
            app.logger.debug("Checked %s -> %s (%s), pattern gate: %s", mask_password(password),
                             outcome.score, outcome.label, outcome.breakdown.pattern_check.reason)

        if app.config["ENABLE_LOG"]:
            log_check(app, password, outcome)

        return jsonify({"success": True, "result": outcome.to_dict()})

    @app.route("/api/generate-password", methods=["POST"])
    def generate_password():
        try:
            password = generate(parse_length(json_body().get("length")))
        except InvalidLengthError as e:
            return jsonify({"success": False, "message": e.message}), 400

        return jsonify({"success": True, "password": password})


if __name__ == "__main__":
    app = create_app()
    app.run(port=app.config["PORT"])
