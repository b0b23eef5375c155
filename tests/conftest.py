import pytest

from ctc_server import create_app
from ctc_server.config import Settings

MODELS = ("model-a", "model-b", "model-c")

SUCCESS_JSON = (
    '{"status": "success", '
    '"research_findings": {"company_policy": "RSUs vest yearly", "estimated_base_salary": 30}, '
    '"monthly_breakdown": {"gross_monthly_cash": 250000, "final_in_hand_salary": 180000}, '
    '"notes": "Part of the CTC is stock."}'
)
MISMATCH_JSON = '{"status": "mismatch", "analysis": "CTC is far below market"}'


class FakeModelClient:
    """Answers from a script keyed by (model, search); unscripted attempts fail."""

    def __init__(self, script=None):
        self.script = script or {}
        self.calls = []

    def generate(self, model, prompt, search=False):
        self.calls.append((model, search))
        outcome = self.script.get((model, search), RuntimeError(f"{model} unavailable"))
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def settings():
    return Settings(api_key="test-key", models=MODELS)


@pytest.fixture
def model_client():
    return FakeModelClient()


@pytest.fixture
def app(settings, model_client):
    app = create_app(settings, model_client=model_client)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def payload():
    return {
        "company": "  Google ",
        "position": "SDE 2",
        "ctc": "45 LPA",
        "location": "Bangalore",
    }
