"""Flask web application for the negative test calculator."""

from __future__ import annotations

import logging
import os
from typing import Any

from flask import Flask, Response, jsonify, render_template, request
from flask_cors import CORS  # type: ignore[import]

from negative_test.chart import render_group_risk_png
from negative_test.const import (
    CHART_CAPTION,
    INDEPENDENCE_ASSUMPTION,
    SLIDERS,
    TITLE,
)
from negative_test.coordinator import calculate
from negative_test.exceptions import InvalidInputError
from negative_test.schema import parse_inputs
from negative_test.types import CalculationResult
from negative_test.utils import format_posterior, format_summary

_LOGGER = logging.getLogger(__name__)

app = Flask(__name__)


def get_allowed_origins() -> list[str] | str:
    """Return allowed origins for CORS configuration."""

    env_value = os.getenv("CALCULATOR_ALLOWED_ORIGINS")
    if env_value is None:
        return [
            "http://localhost:5000",
            "http://127.0.0.1:5000",
        ]

    origins = [origin.strip() for origin in env_value.split(",") if origin.strip()]
    if not origins:
        return "*"
    if "*" in origins:
        return "*"
    return origins


CORS(
    app,
    resources={r"/api/*": {"origins": get_allowed_origins()}},
    supports_credentials=False,
)


def _json_success(payload: dict[str, Any], status: int = 200):
    return jsonify(payload), status


def _json_error(message: str, status: int = 400):
    return jsonify({"error": message}), status


def _serialize_result(result: CalculationResult) -> dict[str, Any]:
    payload = result.as_dict()
    if result.ok:
        payload["posterior_display"] = format_posterior(result.posterior)
        payload["summary"] = format_summary(result.posterior)
    else:
        payload["posterior_display"] = None
        payload["summary"] = result.error
    return payload


@app.route("/", methods=["GET"])
def index():
    """Render the calculator page."""
    return render_template(
        "index.html",
        title=TITLE,
        sliders=SLIDERS,
        assumption=INDEPENDENCE_ASSUMPTION,
        caption=CHART_CAPTION,
    )


@app.route("/api/calculate", methods=["POST"])
def calculate_view():
    """Recalculate both outputs for one set of inputs."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return _json_error("Invalid request payload", 400)

    try:
        result = calculate(parse_inputs(payload))
    except InvalidInputError as exc:
        return _json_error(str(exc), 400)
    except Exception as exc:
        _LOGGER.exception("Error calculating posterior")
        return _json_error(f"Error calculating posterior: {exc!s}", 500)

    if not result.ok:
        return _json_success(_serialize_result(result), 422)
    return _json_success(_serialize_result(result))


@app.route("/api/chart.png", methods=["GET"])
def chart():
    """Render the group risk chart for the inputs in the query string."""
    try:
        result = calculate(parse_inputs(request.args.to_dict()))
    except InvalidInputError as exc:
        return _json_error(str(exc), 400)
    except Exception as exc:
        _LOGGER.exception("Error calculating posterior")
        return _json_error(f"Error calculating posterior: {exc!s}", 500)

    if not result.ok:
        return _json_error(result.error, 422)

    try:
        image = render_group_risk_png(result)
    except Exception as exc:
        _LOGGER.exception("Error rendering chart")
        return _json_error(f"Error rendering chart: {exc!s}", 500)

    response = Response(image, mimetype="image/png")
    response.headers["Cache-Control"] = "no-store"
    return response


@app.route("/api/defaults", methods=["GET"])
def get_defaults():
    """Return slider definitions."""
    return _json_success({"sliders": list(SLIDERS)})


if __name__ == "__main__":
    port = int(os.getenv("PORT", "5000"))
    debug = os.getenv("FLASK_DEBUG", "1") == "1"
    app.run(debug=debug, host="0.0.0.0", port=port)
