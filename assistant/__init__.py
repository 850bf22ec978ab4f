"""Sportsbook Assistant — contextual help and question answering.

Flask application factory lives here so the ``assistant`` package is
directly importable: ``from assistant import create_app``.
"""

import logging

from flask import Flask
from flask_cors import CORS

import config
from assistant.errors import register_error_handlers
from assistant.services.answering import OpenAISettings, build_responder
from assistant.services.pages import build_page_resolver


def create_app(test_config=None):
    """Create and configure the Flask application.

    Args:
        test_config: Optional mapping overriding values loaded from
            ``config``.  Tests use it to point CONTENT_DIR at a temp
            directory, pick the mock backend, or inject an
            OPENAI_CLIENT_FACTORY.
    """
    application = Flask(__name__, static_url_path="/content")

    application.config.from_mapping(
        CONTENT_DIR=str(config.CONTENT_DIR),
        CONTENT_FORMAT=config.CONTENT_FORMAT,
        ANSWER_BACKEND=config.ANSWER_BACKEND,
        OPENAI_API_KEY=config.OPENAI_API_KEY,
        OPENAI_MODEL=config.OPENAI_MODEL,
        OPENAI_MAX_TOKENS=config.OPENAI_MAX_TOKENS,
        OPENAI_TEMPERATURE=config.OPENAI_TEMPERATURE,
        OPENAI_TIMEOUT=config.OPENAI_TIMEOUT,
        OPENAI_CLIENT_FACTORY=None,
    )
    if test_config:
        application.config.update(test_config)

    # Raw content files are served under /content
    application.static_folder = application.config["CONTENT_DIR"]

    # The sportsbook frontend is served from its own origin.
    CORS(application)

    # Logging
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # Core services are built once and only read afterwards
    application.config["PAGE_RESOLVER"] = build_page_resolver(
        application.config["CONTENT_FORMAT"],
        application.config["CONTENT_DIR"],
    )
    settings = OpenAISettings(
        api_key=application.config["OPENAI_API_KEY"],
        model=application.config["OPENAI_MODEL"],
        max_tokens=application.config["OPENAI_MAX_TOKENS"],
        temperature=application.config["OPENAI_TEMPERATURE"],
        timeout_seconds=application.config["OPENAI_TIMEOUT"],
    )
    application.config["QUESTION_RESPONDER"] = build_responder(
        application.config["ANSWER_BACKEND"],
        settings,
        client_factory=application.config["OPENAI_CLIENT_FACTORY"],
    )

    register_error_handlers(application)

    # Register blueprints
    from assistant.routes.health import health_bp
    from assistant.routes.pages import pages_bp
    from assistant.routes.questions import questions_bp

    application.register_blueprint(health_bp)
    application.register_blueprint(questions_bp)
    application.register_blueprint(pages_bp)

    return application
