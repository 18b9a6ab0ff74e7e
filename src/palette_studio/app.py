from __future__ import annotations

import logging
import time
from typing import Any, List, Mapping, Optional

from flask import Flask, Response, jsonify, render_template, request

# Project-local algorithms
from .colors import FORMATS, canon_hex, convert_color, parse_color
from .contrast import AA_NORMAL, AAA_NORMAL, UI_MINIMUM, contrast_ratio, wcag_grade
from .palette import generate_palette, generate_palettes, to_css_variables, to_json
from .variants import color_variants

log = logging.getLogger(__name__)

DEFAULTS: Mapping[str, Any] = {
    "GENERATION_DELAY": 1.5,  # seconds; stands in for a model round-trip
    "PALETTE_COUNT": 20,
    "MAX_VARIANTS": 20,
    "MAX_BRAND_COLORS": 3,
}


def parse_count(val: str | None, default: int, limit: int) -> int:
    try:
        n = int(val) if val not in (None, "") else default
    except ValueError:
        raise ValueError(f"count must be an integer, got {val!r}") from None
    return max(0, min(n, limit))


def parse_brand_colors(limit: int) -> List[str]:
    """Brand colours from a JSON body {"colors": [...]} or ?colors=a,b,c."""
    raw: Any = None
    if request.is_json:
        body = request.get_json(silent=True) or {}
        raw = body.get("colors") if isinstance(body, dict) else None
    if raw is None:
        raw = [c for c in (request.args.get("colors") or "").split(",") if c.strip()]
    if not isinstance(raw, list) or not raw:
        raise ValueError("at least one brand color is required")
    if len(raw) > limit:
        raise ValueError(f"at most {limit} brand colors are supported")
    return [canon_hex(str(c)) for c in raw]


# ----------------------------- Flask app ----------------------------------


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__, template_folder="templates")
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    app.config.from_mapping(DEFAULTS)
    app.config.from_prefixed_env("PALETTE_STUDIO")
    if test_config:
        app.config.from_mapping(test_config)

    @app.route("/")
    def index():
        return render_template("index.html", max_variants=app.config["MAX_VARIANTS"])

    @app.route("/variants")
    def variants():
        limit = int(app.config["MAX_VARIANTS"])
        try:
            base = canon_hex(request.args.get("color", "#3b82f6"))
            tints = parse_count(request.args.get("tints"), 3, limit)
            shades = parse_count(request.args.get("shades"), 3, limit)
        except ValueError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify(color_variants(base, tints, shades))

    @app.route("/convert")
    def convert():
        color = request.args.get("color", "")
        fmt = (request.args.get("format") or "hex").lower()
        if fmt not in FORMATS:
            return jsonify({"error": f"unknown format '{fmt}'", "supported": FORMATS}), 400
        if parse_color(color) is None:
            return jsonify({"error": f"unrecognized color {color!r}"}), 400
        return jsonify({"color": color, "format": fmt, "value": convert_color(color, fmt)})

    @app.route("/contrast")
    def contrast():
        a = request.args.get("a", "")
        b = request.args.get("b", "")
        try:
            ratio = contrast_ratio(a, b)
        except ValueError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify(
            {
                "ratio": round(ratio, 2),
                "grade": wcag_grade(ratio),
                "aa": ratio >= AA_NORMAL,
                "aaa": ratio >= AAA_NORMAL,
                "aa_large": ratio >= UI_MINIMUM,
            }
        )

    @app.route("/palettes", methods=["GET", "POST"])
    def palettes():
        try:
            brand = parse_brand_colors(int(app.config["MAX_BRAND_COLORS"]))
        except ValueError as e:
            return jsonify({"error": f"invalid brand colors: {e}"}), 400

        delay = float(app.config["GENERATION_DELAY"])
        if delay > 0:
            time.sleep(delay)
        try:
            batch = generate_palettes(brand, int(app.config["PALETTE_COUNT"]))
        except Exception as exc:
            log.exception("Palette generation failed")
            return jsonify({"error": str(exc)}), 500
        return jsonify([p.to_dict() for p in batch])

    @app.route("/palettes/export")
    def export():
        fmt = (request.args.get("format") or "css").lower()
        if fmt not in ("css", "json"):
            return jsonify({"error": f"unknown export format '{fmt}'", "supported": ["css", "json"]}), 400
        try:
            brand = parse_brand_colors(int(app.config["MAX_BRAND_COLORS"]))
            index = int(request.args.get("index", 0))
        except ValueError as e:
            return jsonify({"error": str(e)}), 400
        if not 0 <= index < int(app.config["PALETTE_COUNT"]):
            return jsonify({"error": f"index out of range: {index}"}), 400

        palette = generate_palette(brand, index)
        if fmt == "css":
            return Response(to_css_variables(palette), mimetype="text/css")
        return Response(to_json(palette), mimetype="application/json")

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
