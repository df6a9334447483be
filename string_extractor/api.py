#!/usr/bin/env python3
from functools import wraps

from flask import Flask, jsonify, request

from .batch import run
from .config import ExtractionConfig, api_key
from .extractor import NOT_FOUND

app = Flask(__name__)


def require_api_key(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        key = request.headers.get("X-API-Key") or request.args.get("api_key")
        if not key or key != api_key():
            return jsonify({"ok": False, "error": "unauthorized"}), 401
        return func(*args, **kwargs)
    return wrapper


def status_code(outcome):
    if outcome.entries_written:
        return 201
    if outcome.ok:
        return 200
    if outcome.status == NOT_FOUND:
        return 404
    return 422


@app.route("/api/v1/health", methods=["GET"])
def health():
    return jsonify({"ok": True})


@app.route("/api/v1/extract", methods=["POST"])
@require_api_key
def extract_strings():
    try:
        payload = request.get_json(force=True)
    except Exception as e:
        return jsonify({"ok": False, "error": "invalid json", "detail": str(e)}), 400
    ok, info = ExtractionConfig.from_payload(payload)
    if not ok:
        return jsonify({"ok": False, "error": info}), 400
    outcome = run(info)
    return jsonify({"ok": outcome.ok, "result": outcome.as_dict()}), status_code(outcome)


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=5001, debug=False)
