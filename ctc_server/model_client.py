import logging

import openai

from .errors import RemoteCallError

logger = logging.getLogger(__name__)

WEB_SEARCH_TOOL = {"type": "web_search_preview"}


class OpenAIModelClient:
    """Sends one prompt to one model and returns the raw text it answered with."""

    def __init__(self, api_key, timeout=30.0, client=None):
        # Retries are handled by the model cascade, not by the SDK
        self._client = client or openai.OpenAI(
            api_key=api_key, timeout=timeout, max_retries=0
        )

    def generate(self, model, prompt, search=False):
        kwargs = {"model": model, "input": prompt}
        if search:
            kwargs["tools"] = [WEB_SEARCH_TOOL]
        try:
            response = self._client.responses.create(**kwargs)
        except openai.OpenAIError as e:
            raise RemoteCallError(str(e), model=model, original_exception=e) from e
        return (response.output_text or "").strip()
