"""
Flask JSON service for DuelLog season statistics.
"""
import requests
from flask import Flask, jsonify, request

from ..analyzer.filters import StatsFilters, filter_matches
from ..analyzer.season_stats import build_season_stats
from ..utils.season import (
    get_current_season_code,
    get_recent_season_codes,
    get_season_info,
    get_season_label,
)
from .data_manager import DataManager


app = Flask(__name__)

data_manager = DataManager()


@app.errorhandler(requests.RequestException)
def handle_api_error(e):
    """Upstream API failures become 502 responses."""
    return jsonify({"error": "無法取得對局資料", "details": str(e)}), 502


@app.route("/api/seasons")
def api_seasons():
    """Get the current season and recent season options."""
    count = request.args.get("count", 12, type=int)
    current = get_current_season_code()

    seasons = []
    for code in get_recent_season_codes(count, current):
        info = get_season_info(code)
        if info is None:
            continue
        seasons.append({
            "code": code,
            "label": get_season_label(code),
            "start": info.start,
            "end": info.end,
        })

    return jsonify({
        "current": current,
        "seasons": seasons,
    })


@app.route("/api/seasons/<code>/stats")
def api_season_stats(code: str):
    """Get statistics for one season, with a contiguous daily series."""
    info = get_season_info(code)
    if info is None:
        return jsonify({"error": "無效的賽季代碼", "seasonCode": code}), 404

    filters = StatsFilters.from_args(request.args)
    matches = filter_matches(data_manager.get_matches(info.code), filters)
    stats = build_season_stats(matches, info)

    return jsonify({
        "season": info.to_dict(),
        "label": get_season_label(info.code),
        "matchCount": len(matches),
        "stats": stats.to_dict(),
    })


@app.route("/api/history/stats")
def api_history_stats():
    """Get statistics over all matches ever logged."""
    filters = StatsFilters.from_args(request.args)
    matches = filter_matches(data_manager.get_matches(), filters)
    stats = build_season_stats(matches)

    return jsonify({
        "matchCount": len(matches),
        "stats": stats.to_dict(),
    })


@app.route("/api/deck-themes")
def api_deck_themes():
    """Get deck name -> theme lookup for display coloring."""
    return jsonify({"themes": data_manager.get_deck_theme_map()})


@app.route("/api/refresh", methods=["POST"])
def api_refresh():
    data_manager.clear()
    return jsonify({"status": "success"})


def run(host: str = "127.0.0.1", port: int = 5000, debug: bool = True):
    """Run the Flask application."""
    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    run()
