from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from flask import Flask, jsonify, render_template, request

from .colors import (
    DEFAULT_COLOR,
    color_from_query,
    generate_random_hex_color,
    hex_to_rgb,
    is_valid_hex,
    readable_text_color,
    try_parse_input_color,
)
from .config import Config
from .naming import ColorNamer
from .palette import PaletteError, extract_palette

log = logging.getLogger(__name__)


# ----------------------------- Flask app ----------------------------------


def create_app(
    config: Mapping[str, Any] | None = None, namer: Optional[ColorNamer] = None
) -> Flask:
    app = Flask(__name__, static_folder="static", template_folder="templates")
    app.config.from_object(Config)
    if config:
        app.config.update(config)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    default = app.config.get("HUEVANA_DEFAULT_COLOR")
    if not isinstance(default, str) or not is_valid_hex(default.strip()):
        log.warning("Invalid HUEVANA_DEFAULT_COLOR %r, using %s", default, DEFAULT_COLOR)
        app.config["HUEVANA_DEFAULT_COLOR"] = DEFAULT_COLOR
    else:
        app.config["HUEVANA_DEFAULT_COLOR"] = default.strip()

    if namer is None:
        namer = ColorNamer.from_config(app.config)

    @app.route("/")
    def index():
        color = color_from_query(
            request.args.get("color"), app.config["HUEVANA_DEFAULT_COLOR"]
        )
        return render_template(
            "index.html",
            color=color,
            rgb=hex_to_rgb(color),
            text_color=readable_text_color(color),
            naming_enabled=namer is not None,
        )

    @app.route("/convert")
    def convert():
        raw = request.args.get("color", "")
        hex_color = try_parse_input_color(raw)
        return jsonify(
            {
                "input": raw,
                "valid": hex_color is not None,
                "hex": hex_color,
                "rgb": hex_to_rgb(hex_color) if hex_color else None,
                "text": readable_text_color(hex_color) if hex_color else None,
            }
        )

    @app.route("/random")
    def random_color():
        color = generate_random_hex_color()
        return jsonify(
            {"hex": color, "rgb": hex_to_rgb(color), "text": readable_text_color(color)}
        )

    @app.route("/name", methods=["POST"])
    def name():
        color = (request.form.get("color") or "").strip()
        if not is_valid_hex(color):
            return jsonify({"error": f"invalid hex color '{color}'"}), 400
        if namer is None:
            return jsonify({"error": "color naming is not configured"}), 503

        color_name = namer.name(color)
        if color_name is None:
            return jsonify({"error": "naming service unavailable"}), 502
        log.info("Named %s as %r", color, color_name)
        return jsonify({"color": color, "name": color_name})

    @app.route("/palette", methods=["POST"])
    def palette():
        upload = request.files.get("image")
        if upload is None or not upload.filename:
            return jsonify({"error": "missing image upload"}), 400
        try:
            colors = extract_palette(
                upload.stream, count=int(app.config["HUEVANA_PALETTE_SIZE"])
            )
        except PaletteError as exc:
            return jsonify({"error": str(exc)}), 400
        except Exception as exc:
            log.exception("Palette extraction failed")
            return jsonify({"error": str(exc)}), 500
        return jsonify(colors)

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=app.config["DEBUG"], threaded=True)
