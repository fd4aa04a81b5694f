"""Flask WSGI app exposing range matrices, adjustments and practice drills."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional, Set

from flask import Flask, jsonify, request

from rangelab.service import RangeService

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return int(default)
    try:
        return int(str(raw).strip())
    except ValueError:
        return int(default)


def _split_csv(value: str) -> Set[str]:
    return {part.strip().lower() for part in str(value or "").split(",") if part.strip()}


def _api_error(message: str, status: int = 400):
    return jsonify({"error": str(message)}), int(status)


@dataclass(frozen=True)
class RuntimeConfig:
    env: str
    host: str
    port: int
    debug: bool
    allowed_hosts: Set[str]
    log_level: str
    max_practice_sessions: int


def load_runtime_config() -> RuntimeConfig:
    env = str(os.getenv("RANGELAB_ENV", "development")).strip().lower()
    return RuntimeConfig(
        env=env,
        host=str(os.getenv("RANGELAB_HOST", "127.0.0.1")).strip(),
        port=_env_int("RANGELAB_PORT", 8787),
        debug=_env_bool("RANGELAB_DEBUG", env != "production"),
        allowed_hosts=_split_csv(os.getenv("RANGELAB_ALLOWED_HOSTS", "")),
        log_level=str(os.getenv("RANGELAB_LOG_LEVEL", "INFO")).strip().upper(),
        max_practice_sessions=max(1, _env_int("RANGELAB_MAX_PRACTICE_SESSIONS", 500)),
    )


def create_app(
    runtime: Optional[RuntimeConfig] = None,
    service: Optional[RangeService] = None,
) -> Flask:
    runtime = runtime or load_runtime_config()
    service = service or RangeService(max_sessions=runtime.max_practice_sessions)

    app = Flask(__name__)
    app.config["JSON_SORT_KEYS"] = False
    app.extensions["rangelab_service"] = service

    @app.before_request
    def _before_request():
        host = str(request.headers.get("X-Forwarded-Host") or request.host).split(",")[0].strip().lower()
        host_no_port = host.split(":")[0]
        if runtime.allowed_hosts and host_no_port not in runtime.allowed_hosts:
            logger.info("Rejected request for host %s", host_no_port)
            return _api_error("Host is not allowed", status=400)
        return None

    @app.after_request
    def _after_request(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        return resp

    def _call(handler, *args):
        try:
            return jsonify(handler(*args))
        except (ValueError, KeyError) as exc:
            message = exc.args[0] if isinstance(exc, KeyError) and exc.args else str(exc)
            logger.info("Rejected %s %s: %s", request.method, request.path, message)
            return _api_error(str(message), status=400)

    def _json_post(payload_handler):
        payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict):
            return _api_error("JSON object body is required", status=400)
        return _call(payload_handler, payload)

    @app.get("/api/health")
    @app.get("/healthz")
    def health():
        return jsonify({"ok": True})

    @app.get("/api/config")
    def api_config():
        return jsonify(service.app_config())

    @app.get("/api/ranges")
    def api_ranges():
        position = str(request.args.get("position", "")).strip()
        if not position:
            return _api_error("position is required", status=400)
        return _call(service.opening_range, position)

    @app.get("/api/charts")
    def api_charts():
        position = str(request.args.get("position", "")).strip()
        if not position:
            return _api_error("position is required", status=400)
        hand = str(request.args.get("hand", "")).strip() or None
        return _call(service.gto_chart, position, hand)

    @app.get("/api/charts/playable")
    def api_charts_playable():
        position = str(request.args.get("position", "")).strip()
        if not position:
            return _api_error("position is required", status=400)
        return _call(service.playable_chart_hands, position)

    @app.post("/api/ranges/stats")
    def api_range_stats():
        return _json_post(service.range_stats)

    @app.post("/api/ranges/adjust")
    def api_range_adjust():
        return _json_post(service.adjust)

    @app.post("/api/hands/classify")
    def api_classify():
        return _json_post(service.classify)

    @app.post("/api/practice/session")
    def api_practice_start():
        return _json_post(service.practice_start)

    @app.get("/api/practice/session")
    def api_practice_summary():
        session_id = str(request.args.get("session_id", "")).strip()
        if not session_id:
            return _api_error("session_id is required", status=400)
        return _call(service.practice_summary, session_id)

    @app.post("/api/practice/scenario")
    def api_practice_scenario():
        return _json_post(service.practice_scenario)

    @app.post("/api/practice/decision")
    def api_practice_decision():
        return _json_post(service.practice_decision)

    @app.errorhandler(404)
    def not_found(_err):
        return _api_error("Not found", status=404)

    @app.errorhandler(500)
    def server_error(err):
        logger.error(
            "Unhandled error on %s",
            request.path,
            exc_info=getattr(err, "original_exception", None) or err,
        )
        return _api_error("Internal server error", status=500)

    return app
