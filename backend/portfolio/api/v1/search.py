from flask import current_app, jsonify, request
from portfolio.application.search import search
from . import v1_bp


@v1_bp.route("/search", methods=["GET"])
def search_site():
    term = request.args.get("q", "").strip()
    max_length = current_app.config.get("SEARCH_SNIPPET_LENGTH", 200)

    results = search(term)

    return jsonify({
        "query": term,
        "count": len(results),
        "results": [r.to_dict(term, max_length) for r in results],
    })
