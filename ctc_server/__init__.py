import logging

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import Settings
from .logging_config import configure_logging
from .model_client import OpenAIModelClient

logger = logging.getLogger(__name__)


def create_app(settings=None, model_client=None):
    if settings is None:
        # Load environment variables from the .env file
        load_dotenv()
        settings = Settings.from_env()

    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.json.ensure_ascii = False

    # Only the known frontends may call the API
    CORS(app, origins=list(settings.cors_origins), supports_credentials=True)

    if model_client is None and settings.api_key:
        model_client = OpenAIModelClient(settings.api_key, timeout=settings.request_timeout)
    app.extensions["ctc_settings"] = settings
    app.extensions["ctc_model_client"] = model_client

    from .routes import bp as salary_bp
    app.register_blueprint(salary_bp)

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.error("Unhandled error: %s", e, exc_info=True)
        return jsonify({"error": "Internal server error"}), 500

    if not settings.api_key:
        logger.warning("OPENAI_API_KEY is not set; salary requests will be rejected")

    return app
