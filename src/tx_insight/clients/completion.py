"""Chat-completion client used to summarize a decoded call."""

import logging
from typing import Optional

from openai import OpenAI, OpenAIError

from ..config import Settings
from ..errors import CompletionError

logger = logging.getLogger(__name__)


class CompletionClient:
    """Thin wrapper over an OpenAI-compatible chat completions endpoint."""

    def __init__(self, settings: Settings, client: Optional[OpenAI] = None):
        self.model = settings.gpt_model
        self.client = client or OpenAI(
            api_key=settings.gpt_api_key,
            base_url=f"{settings.gpt_api_endpoint.rstrip('/')}/v1",
            max_retries=0,
        )

    def request_summary(self, prompt: str) -> str:
        """
        Send the prompt as a single user message and return the first answer.

        Args:
            prompt: Prompt built by build_summarization_prompt

        Returns:
            Content of the first response message, verbatim

        Raises:
            CompletionError: If the service fails or returns no message
        """
        logger.info(f"Requesting completion ({len(prompt)} chars prompt) with {self.model}")
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
            )
        except OpenAIError as e:
            logger.error(f"Completion request failed: {type(e).__name__}: {e}")
            raise CompletionError("Failed to get GPT completion.") from e

        if not response.choices or response.choices[0].message.content is None:
            logger.error(f"Completion response has no message: {response}")
            raise CompletionError("Failed to get GPT completion.")

        logger.info("✅ Received completion")
        return response.choices[0].message.content
