from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional

from flask import Flask, Response, jsonify, request

from .convert import InvalidColor, display_hex, parse
from .export import export, export_theme, format_oklch
from .palette import (
    DEFAULT_PRIMARY,
    DEFAULT_SECONDARY,
    Palette,
    build_palette,
    random_hex,
)

log = logging.getLogger(__name__)


def palette_json(p: Palette) -> dict[str, Any]:
    steps = []
    for s in p.scale:
        l, c, h = s.polar
        steps.append(
            {
                "step": s.step,
                "hex": s.hex,
                "label": display_hex(s.hex),
                "oklch": [l, c, None if math.isnan(h) else h],
                "css": format_oklch(s.polar),
            }
        )
    base = parse(p.base)
    return {"base": base, "label": display_hex(base), "name": p.name, "steps": steps}


def _arg_color(key: str, default: str) -> str:
    return parse(request.args.get(key) or default)


# ----------------------------- Flask app ----------------------------------


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(
        DEFAULT_COLOR=DEFAULT_PRIMARY,
        DEFAULT_SECONDARY=DEFAULT_SECONDARY,
    )
    app.config.from_prefixed_env("COLOR_SCALE")
    if test_config is not None:
        app.config.from_mapping(test_config)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    @app.route("/api/palette")
    def palette():
        try:
            color = _arg_color("color", app.config["DEFAULT_COLOR"])
        except InvalidColor as e:
            return jsonify({"error": f"invalid color: {e}"}), 400

        p = build_palette(color)
        if not p.ok:
            log.error("No palette for %s", color)
            return jsonify({"error": "palette unavailable"}), 500
        return jsonify(palette_json(p))

    @app.route("/api/export")
    def export_css():
        try:
            color = _arg_color("color", app.config["DEFAULT_COLOR"])
            second = None
            if "secondary" in request.args:
                # bare ?secondary falls back to the configured default
                second = _arg_color("secondary", app.config["DEFAULT_SECONDARY"])
        except InvalidColor as e:
            return jsonify({"error": f"invalid color: {e}"}), 400

        palettes = [build_palette(color)]
        if second is not None:
            palettes.append(build_palette(second))
        try:
            pairs = [(p.scale, p.name) for p in palettes]
            if request.args.get("wrap", "1") == "0":
                text = "".join(export(scale, name) for scale, name in pairs)
            else:
                text = export_theme(pairs)
        except Exception as exc:
            log.exception("Export failed")
            return jsonify({"error": str(exc)}), 500

        return Response(text, mimetype="text/plain")

    @app.route("/api/random")
    def random_color():
        return jsonify({"color": random_hex()})

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
