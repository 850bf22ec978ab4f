"""Free-form question API.

Endpoint:
    POST /assistant/query  {question, context?} → {question, answer}

Empty questions are rejected here with 400 before any responder runs.
Responder failures are turned into a generic 500 by the handlers in
``assistant.errors``.
"""

import logging

from flask import Blueprint, current_app, jsonify, request

from assistant.errors import ValidationError
from assistant.models import QuestionRequest

questions_bp = Blueprint("questions", __name__)

log = logging.getLogger(__name__)


@questions_bp.route("/assistant/query", methods=["POST"])
async def post_query():
    """Answer a free-form question, optionally scoped to a context."""
    body = request.get_json(silent=True)
    try:
        query = QuestionRequest.from_payload(body)
    except ValidationError as exc:
        log.info("Rejected assistant question: %s", exc)
        return jsonify({"error": "Invalid question", "message": exc.public_message}), 400

    responder = current_app.config["QUESTION_RESPONDER"]
    response = await responder.answer(query.question, query.context)

    log.info("Answered assistant question for context %s", query.context or "none")
    return jsonify(response.to_dict())
