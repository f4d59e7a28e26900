"""Chat completion over Gemini using role/content message lists."""

import logging
from typing import Dict, List, Optional

from google import genai
from google.genai import types

logger = logging.getLogger(__name__)

_ROLES = {"user": "user", "assistant": "model", "model": "model"}


def to_request(messages: List[Dict[str, str]]):
    """Split messages into (system_instruction, contents) as generate_content expects."""
    system = [m["content"] for m in messages if m["role"] == "system"]
    contents = [
        types.Content(role=_ROLES[m["role"]], parts=[types.Part(text=m["content"])])
        for m in messages
        if m["role"] != "system"
    ]
    return ("\n\n".join(system) or None), contents


def _finish_reason(response) -> Optional[str]:
    try:
        return str(response.candidates[0].finish_reason)
    except (AttributeError, IndexError, TypeError):
        return None


class ChatModel:
    """Thinking tokens count against max_output_tokens, so the budget defaults to 0."""

    def __init__(self, client: genai.Client, model_name: str = "gemini-2.5-flash", thinking_budget: int = 0):
        self.client = client
        self.model_name = model_name
        self.thinking_budget = thinking_budget

    async def complete(
        self,
        messages: List[Dict[str, str]],
        *,
        max_tokens: int = 150,
        temperature: float = 0.7,
    ) -> str:
        system_instruction, contents = to_request(messages)
        response = await self.client.aio.models.generate_content(
            model=self.model_name,
            contents=contents,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
                max_output_tokens=max_tokens,
                temperature=temperature,
                thinking_config=types.ThinkingConfig(thinking_budget=self.thinking_budget),
            ),
        )
        text = response.text
        if not text:
            logger.warning(f"Empty completion | model={self.model_name} | finish_reason={_finish_reason(response)}")
            return ""
        return text
