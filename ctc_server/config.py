import os
from dataclasses import dataclass

# Models to try, in order of preference
DEFAULT_MODELS = ("gpt-4.1", "gpt-4o", "gpt-4o-mini")

# Frontends allowed to call the API
CORS_ORIGINS = (
    "http://localhost:5173",  # Local development
    "https://ctc-client-798p.vercel.app",  # Deployed frontend
)


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once at startup and passed into create_app."""

    api_key: str = ""
    port: int = 5000
    request_timeout: float = 30.0
    log_level: str = "INFO"
    debug: bool = False
    models: tuple = DEFAULT_MODELS
    cors_origins: tuple = CORS_ORIGINS

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        return cls(
            api_key=env.get("OPENAI_API_KEY", "").strip(),
            port=int(env.get("PORT", 5000)),
            request_timeout=float(env.get("REQUEST_TIMEOUT", 30)),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            debug=env.get("FLASK_DEBUG", "").lower() in ["1", "true", "yes"],
        )
