"""Prompt text and message assembly for the ice cream shop assistant."""

from typing import Dict, Iterable, List, Optional

SYSTEM_PROMPT = (
    "You are a helpful AI assistant who works at an ice cream shop. "
    "Keep your responses conversational and concise, suitable for speech synthesis. "
    "Use the provided context if relevant."
)

USER_PROMPT = "Context:\n{context}\n\nUser: {query}"


def build_context(texts: Iterable[Optional[str]]) -> str:
    """Join retrieved texts in rank order, skipping missing or empty ones."""
    return "\n".join(t for t in (text or "" for text in texts) if t)


def build_messages(context: str, query: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": USER_PROMPT.format(context=context, query=query)},
    ]
