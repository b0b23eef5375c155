from unittest.mock import MagicMock, patch

import openai
import pytest

from ctc_server import create_app
from ctc_server.config import Settings
from ctc_server.errors import RemoteCallError
from ctc_server.model_client import WEB_SEARCH_TOOL, OpenAIModelClient


@pytest.fixture
def sdk():
    mock_sdk = MagicMock()
    mock_sdk.responses.create.return_value.output_text = '  {"status": "success"}\n'
    return mock_sdk


def test_search_mode_sends_web_search_tool(sdk):
    text = OpenAIModelClient("key", client=sdk).generate("gpt-4o", "prompt", search=True)

    assert text == '{"status": "success"}'
    sdk.responses.create.assert_called_once_with(
        model="gpt-4o", input="prompt", tools=[WEB_SEARCH_TOOL]
    )


def test_plain_mode_sends_no_tools(sdk):
    OpenAIModelClient("key", client=sdk).generate("gpt-4o", "prompt")
    sdk.responses.create.assert_called_once_with(model="gpt-4o", input="prompt")


def test_sdk_errors_become_remote_call_errors(sdk):
    sdk.responses.create.side_effect = openai.OpenAIError("Connection error.")
    with pytest.raises(RemoteCallError) as excinfo:
        OpenAIModelClient("key", client=sdk).generate("gpt-4o", "prompt")

    assert excinfo.value.message == "Connection error."
    assert excinfo.value.model == "gpt-4o"
    assert isinstance(excinfo.value.original_exception, openai.OpenAIError)


@patch("openai.OpenAI")
def test_sdk_client_is_bounded_and_does_not_retry(mock_openai):
    OpenAIModelClient("key")
    mock_openai.assert_called_once_with(api_key="key", timeout=30.0, max_retries=0)


@patch("openai.OpenAI")
def test_create_app_passes_configured_timeout(mock_openai):
    create_app(Settings(api_key="k", request_timeout=5))
    mock_openai.assert_called_once_with(api_key="k", timeout=5, max_retries=0)


@patch("openai.OpenAI")
def test_create_app_without_key_builds_no_sdk_client(mock_openai):
    app = create_app(Settings(api_key=""))
    mock_openai.assert_not_called()
    assert app.extensions["ctc_model_client"] is None
