"""Error taxonomy for the assistant service and the HTTP boundary handlers.

Clients only ever see a short, generic message.  The real cause (upstream
exception, I/O fault, missing credential) goes to the log.

    ValidationError        → 400, returned directly by the route
    ConfigurationError     → 500
    AnswerTimeoutError     → 500
    AnswerGenerationError  → 500
    OSError (content read) → 500
    any other exception    → 500

"Not found" is not an exception: resolvers return None and the route
answers 404.
"""

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

log = logging.getLogger(__name__)

GENERIC_ERROR = "Processing error"
GENERIC_MESSAGE = "An error occurred while processing your request."


class AssistantError(Exception):
    """Base class for all errors raised by the assistant core."""

    public_message = GENERIC_MESSAGE


class ValidationError(AssistantError):
    """The request body failed validation (e.g. an empty question)."""

    def __init__(self, message):
        super().__init__(message)
        self.public_message = message


class ConfigurationError(AssistantError):
    """A required setting (API key, backend name, ...) is missing or invalid."""


class AnswerTimeoutError(AssistantError):
    """The answer backend did not respond within its own deadline."""


class AnswerGenerationError(AssistantError):
    """The answer backend failed for any other reason."""


def register_error_handlers(application):
    """Translate core failures into generic 500 responses."""

    @application.errorhandler(AssistantError)
    def _assistant_error(exc):
        log.error("Request failed with %s: %s", type(exc).__name__, exc, exc_info=exc)
        return jsonify({"error": GENERIC_ERROR, "message": exc.public_message}), 500

    @application.errorhandler(OSError)
    def _io_error(exc):
        log.error("I/O failure while handling request: %s", exc, exc_info=exc)
        return jsonify({"error": GENERIC_ERROR, "message": GENERIC_MESSAGE}), 500

    @application.errorhandler(Exception)
    def _unexpected_error(exc):
        # Routing errors (404, 405) keep their own responses.
        if isinstance(exc, HTTPException):
            return exc
        log.error("Unexpected failure while handling request: %s", exc, exc_info=exc)
        return jsonify({"error": GENERIC_ERROR, "message": GENERIC_MESSAGE}), 500
