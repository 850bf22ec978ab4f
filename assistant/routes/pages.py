"""Context-aware help articles.

Endpoint:
    GET /assistant/<context_info> → ``[{"title", "content"}]`` for a context

Context identifiers are slash-delimited (``bet-slip/empty``) and map to
the content file ``bet-slip-empty.md``.  The single article is wrapped in
a list so the response can grow to several articles later.
"""

import logging

from flask import Blueprint, current_app, jsonify

pages_bp = Blueprint("pages", __name__)

log = logging.getLogger(__name__)


@pages_bp.route("/assistant/<path:context_info>", methods=["GET"])
async def get_articles(context_info):
    """Return the help article for a context identifier."""
    resolver = current_app.config["PAGE_RESOLVER"]
    article = await resolver.resolve(context_info)
    if article is None:
        log.info("Assistant page for context %r not found.", context_info)
        return jsonify({
            "error": "Not found",
            "message": f"No help available for context: {context_info}",
        }), 404

    log.info("Assistant page for context %r served: %s", context_info, article.title)
    return jsonify([article.to_dict()])
