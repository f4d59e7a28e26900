"""Pass-through to a web-search enabled Gemini model, no retrieval involved."""

import logging

from google import genai
from google.genai import types

logger = logging.getLogger(__name__)

NO_REPLY = "No reply generated"


def first_text(response) -> str:
    """Text of the first part of the first candidate, or NO_REPLY for any other shape."""
    try:
        text = response.candidates[0].content.parts[0].text
    except (AttributeError, IndexError, TypeError):
        logger.warning("Unexpected browsing response shape")
        return NO_REPLY
    return text or NO_REPLY


class BrowsingAgent:
    def __init__(self, client: genai.Client, model_name: str = "gemini-2.5-flash"):
        self.client = client
        self.model_name = model_name
        self._config = types.GenerateContentConfig(
            tools=[types.Tool(google_search=types.GoogleSearch())],
        )

    async def reply(self, text: str) -> str:
        logger.info(f"Browsing request | text_length={len(text)}")
        response = await self.client.aio.models.generate_content(
            model=self.model_name,
            contents=text,
            config=self._config,
        )
        return first_text(response)
