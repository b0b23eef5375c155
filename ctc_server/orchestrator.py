"""Model fallback cascade.

The same prompt is tried against each configured model with web search
enabled, then against each model again without it. The first attempt whose
output parses into a known result shape wins; attempts run one at a time.
"""

import logging
from dataclasses import dataclass

from .errors import RemoteCallError
from .normalizer import parse_salary_result

logger = logging.getLogger(__name__)

ALL_FAILED_MESSAGE = "All models failed. Please check your API key and available models."


@dataclass(frozen=True)
class ModelAttempt:
    model: str
    search: bool

    @property
    def label(self):
        return f"{self.model} (with web search)" if self.search else self.model


@dataclass(frozen=True)
class CascadeResult:
    data: dict
    attempt: ModelAttempt


def build_attempts(models):
    """Every model with search first, then every model without it."""
    return [ModelAttempt(m, True) for m in models] + [ModelAttempt(m, False) for m in models]


def run_cascade(client, prompt, models):
    """Return the first parsed result across all attempts.

    Raises the last recorded attempt error once every attempt has failed.
    """
    attempts = build_attempts(models)
    logger.info("Models to try: %s", ", ".join(models))

    last_error = None
    for attempt in attempts:
        logger.info("Trying model: %s", attempt.label)
        try:
            raw_text = client.generate(attempt.model, prompt, search=attempt.search)
            data = parse_salary_result(raw_text)
        except Exception as e:
            logger.warning("Model %s failed: %s", attempt.label, e)
            last_error = e
            continue
        logger.info("Got salary breakdown from %s", attempt.label)
        return CascadeResult(data=data, attempt=attempt)

    raise last_error or RemoteCallError(ALL_FAILED_MESSAGE)
