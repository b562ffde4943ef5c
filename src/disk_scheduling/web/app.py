"""Flask application factory for the disk scheduling JSON API.

The ``create_app`` function returns a Flask app with two endpoints:

- ``GET /api/policies`` — list the available policy names.
- ``POST /api/schedule`` — schedule a batch of requests and return
  the visit order and distances for each requested policy.
"""

from __future__ import annotations

from typing import Any

from flask import Flask, Response, jsonify, request

from disk_scheduling.logging import Logger, LogLevel
from disk_scheduling.policies import Policy, SchedulingError, parse_policy
from disk_scheduling.scheduler import parse_requests, schedule_all

_HTTP_BAD_REQUEST = 400
_SOURCE = "web"


def _is_int(value: object) -> bool:
    """Return True for JSON integers; ``true``/``false`` don't count."""
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_body(data: dict[str, Any]) -> tuple[list[int], int, int, list[Policy]]:
    """Validate a schedule request body.

    Raises:
        SchedulingError: If a field is missing or malformed.

    """
    for field in ("requests", "start", "tracks"):
        if field not in data:
            msg = f"Missing '{field}' field"
            raise SchedulingError(msg)

    raw_requests = data["requests"]
    if isinstance(raw_requests, str):
        requests = parse_requests(raw_requests)
    elif isinstance(raw_requests, list):
        for track in raw_requests:
            if not _is_int(track):
                msg = f"Invalid track number {track!r}"
                raise SchedulingError(msg)
        requests = list(raw_requests)
    else:
        msg = "'requests' must be a list or a space-separated string"
        raise SchedulingError(msg)

    start, tracks = data["start"], data["tracks"]
    if not _is_int(start) or not _is_int(tracks):
        msg = "'start' and 'tracks' must be integers"
        raise SchedulingError(msg)

    names = data.get("policies")
    if names is None:
        return requests, start, tracks, list(Policy)
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        msg = "'policies' must be a list of policy names"
        raise SchedulingError(msg)
    return requests, start, tracks, [parse_policy(name) for name in names]


def create_app(*, logger: Logger | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        logger: Log that records every request served; a fresh one is
            created when omitted and exposed as ``app.extensions["scheduler_log"]``.

    Returns:
        A configured Flask application ready to serve.

    """
    log = logger if logger is not None else Logger()
    app = Flask(__name__)
    app.extensions["scheduler_log"] = log

    @app.route("/api/policies")
    def policies() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the names of the available policies."""
        return jsonify({"policies": [str(policy) for policy in Policy]})

    @app.route("/api/schedule", methods=["POST"])
    def schedule() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Schedule a batch of requests and return JSON results.

        Expects JSON body:
        ``{"requests": [...], "start": 100, "tracks": 200, "policies": [...]}``

        Returns:
            JSON with a ``results`` list, or ``error`` on bad input.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), _HTTP_BAD_REQUEST

        try:
            requests, start, tracks, selected = _parse_body(data)
            results = schedule_all(
                requests,
                start=start,
                number_of_tracks=tracks,
                policies=selected,
            )
        except SchedulingError as e:
            log.log(LogLevel.WARNING, f"rejected request: {e}", source=_SOURCE)
            return jsonify({"error": str(e)}), _HTTP_BAD_REQUEST

        log.log(LogLevel.INFO, f"scheduled {len(requests)} requests", source=_SOURCE)
        return jsonify({"results": [result.to_dict() for result in results]})

    return app


def main() -> None:
    """Run the web API development server.

    This is the ``disk-scheduling-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
