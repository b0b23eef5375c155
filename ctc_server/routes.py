import logging

from flask import Blueprint, current_app, jsonify, request

from .errors import ConfigurationError, ValidationError
from .orchestrator import run_cascade
from .prompts import build_salary_prompt
from .shaping import shape_salary_response
from .validation import validate_salary_request

logger = logging.getLogger(__name__)

bp = Blueprint("salary", __name__)


def terminal_error_message(error):
    """Turn the error that ended the cascade into the message shown to the user."""
    message = str(error) or "Unknown error"
    if "API_KEY" in message or "API key" in message:
        return "Invalid or missing OpenAI API key. Please check your API key."
    if "404" in message or "not found" in message:
        return "Model not available. Please check your API key has access to the configured models."
    return f"Failed to fetch salary estimate: {message}"


def require_api_key(settings):
    if not settings.api_key:
        raise ConfigurationError("Server configuration error: API key not found")


@bp.errorhandler(ValidationError)
def handle_validation_error(e):
    return jsonify({"error": e.message}), 400


@bp.errorhandler(ConfigurationError)
def handle_configuration_error(e):
    logger.error("OPENAI_API_KEY is not set in environment variables")
    return jsonify({"error": e.message}), 500


@bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok", "message": "Server is running"})


@bp.route("/api/salary", methods=["POST"])
def salary():
    salary_request = validate_salary_request(request.get_json(silent=True))
    settings = current_app.extensions["ctc_settings"]
    require_api_key(settings)

    logger.info(
        "Calculating salary breakdown for: %s - %s - %s - %s",
        salary_request.company,
        salary_request.position,
        salary_request.ctc,
        salary_request.location,
    )
    prompt = build_salary_prompt(salary_request)
    client = current_app.extensions["ctc_model_client"]

    try:
        result = run_cascade(client, prompt, settings.models)
    except Exception as e:
        logger.error("Error fetching salary estimate: %s", e, exc_info=True)
        return jsonify({"error": terminal_error_message(e)}), 500

    if result.data["status"] == "mismatch":
        logger.info("Salary reality check failed - mismatch detected")
    else:
        logger.info("Salary reality check passed using %s", result.attempt.label)

    return jsonify(shape_salary_response(salary_request, result.data))
