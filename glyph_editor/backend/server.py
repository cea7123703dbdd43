import json
import logging
import os
from dataclasses import asdict
from functools import wraps

import webview
from flask import Flask, jsonify, render_template, request

from glyph_editor.backend.utils import glyph_encoder as enc
from glyph_editor.backend.utils.generate_svg import generate_glyph_svg
from glyph_editor.backend.utils.settings_manager import (
    get_preset,
    preset_names,
)

logger = logging.getLogger(__name__)

gui_dir = os.path.join(os.path.dirname(__file__), "..", "gui")

server = Flask(__name__, static_folder=gui_dir, template_folder=gui_dir)
server.config["SEND_FILE_MAX_AGE_DEFAULT"] = 1  # disable caching

COMMANDS = {
    "clear": enc.Clear,
    "fill": enc.FillAll,
    "test-pattern": enc.LoadTestPattern,
}


def verify_token(function):
    @wraps(function)
    def wrapper(*args, **kwargs):
        data = json.loads(request.data)
        token = data.get("token")
        if token == webview.token:
            return function(*args, **kwargs)
        else:
            raise Exception("Authentication error")

    return wrapper


def state_payload(state: enc.GlyphState) -> dict:
    return {
        "active": sorted(state.active_pixels),
        "bytes": list(state.font_data),
        "array": enc.format_array(state.font_data),
        "declarations": enc.format_declarations(state.font_data),
        "columns": [asdict(c) for c in enc.column_breakdown(state.font_data)],
        "matrix": enc.bit_matrix(state.font_data),
    }


def parse_state(data: dict) -> enc.GlyphState:
    active = data.get("active", []) or []
    if not isinstance(active, list):
        raise ValueError("'active' must be a list of pixel ids")
    return enc.GlyphState.from_pixels(
        enc.validate_pixel_id(value) for value in active
    )


def parse_command(data: dict) -> enc.Command:
    command = data.get("command") or {}
    if not isinstance(command, dict):
        raise ValueError("'command' must be an object")
    kind = command.get("type")
    if kind == "toggle":
        return enc.Toggle(command.get("id"))
    if kind in COMMANDS:
        return COMMANDS[kind]()
    raise ValueError(f"Unknown command type: {kind!r}")


def _error(message: str):
    logger.warning(f"Rejected request: {message}")
    return jsonify({"status": "error", "message": message}), 400


@server.after_request
def add_header(response):
    response.headers["Cache-Control"] = "no-store"
    return response


@server.route("/")
def home():
    """
    Render main.html. The initial glyph state is fetched by the page via /init
    """
    return render_template("main.html", token=webview.token)


@server.route("/init", methods=["POST"])
@verify_token
def initialize():
    response = {
        "status": "ok",
        "state": state_payload(enc.clear()),
        "presets": preset_names(),
    }
    return jsonify(response)


@server.route("/apply", methods=["POST"])
@verify_token
def apply_command():
    """
    Run one editor command against the glyph sent by the page.
    :return: the resulting glyph state
    """
    data = request.json or {}
    try:
        state = parse_state(data)
        command = parse_command(data)
    except ValueError as e:
        return _error(str(e))

    result = enc.apply(state, command)
    return jsonify({"status": "ok", "state": state_payload(result)})


@server.route("/render/glyph", methods=["POST"])
@verify_token
def render_glyph():
    data = request.json or {}
    try:
        state = parse_state(data)
        preset = data.get("preset")
        style = get_preset(preset) if preset else None
    except (ValueError, KeyError) as e:
        return _error(str(e))

    if style is None:
        result = generate_glyph_svg(state)
    else:
        result = generate_glyph_svg(state, style=style)
    return jsonify({"status": "ok", "result": result})

