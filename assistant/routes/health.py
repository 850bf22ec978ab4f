"""Health check endpoint for the Assistant API."""

import time

from flask import Blueprint, current_app, jsonify

import config

health_bp = Blueprint("health", __name__)

# Uptime is measured from module import.
_start_time = time.time()


@health_bp.route("/api/health", methods=["GET"])
def health():
    """Return service health plus what content and answering are wired up."""
    resolver = current_app.config["PAGE_RESOLVER"]
    responder = current_app.config["QUESTION_RESPONDER"]
    return jsonify(
        {
            "status": "operational",
            "uptime_seconds": round(time.time() - _start_time, 1),
            "version": config.VERSION,
            "content_format": current_app.config["CONTENT_FORMAT"],
            "articles_total": len(resolver.index),
            "answer_backend": responder.name,
            "answering_configured": responder.configured,
        }
    )
