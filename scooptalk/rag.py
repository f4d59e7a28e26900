"""Core RAG engine: embed the query, retrieve context, generate a spoken-style answer."""

import logging
import time
from typing import Optional

from google import genai

from scooptalk.chat import ChatModel
from scooptalk.config import Settings
from scooptalk.embeddings import EmbeddingModel
from scooptalk.logging_config import QueryMetrics, log_latency
from scooptalk.prompts import build_context, build_messages
from scooptalk.vector_index import VectorIndex

logger = logging.getLogger(__name__)


class RAGEngine:
    def __init__(
        self,
        embedder: EmbeddingModel,
        index: VectorIndex,
        chat: ChatModel,
        *,
        top_k: int = 5,
        max_tokens: int = 150,
        temperature: float = 0.7,
        metrics: Optional[QueryMetrics] = None,
    ):
        self.embedder = embedder
        self.index = index
        self.chat = chat
        self.top_k = top_k
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.metrics = metrics or QueryMetrics()

    @classmethod
    def from_settings(cls, settings: Settings, client: Optional[genai.Client] = None) -> "RAGEngine":
        client = client or genai.Client(api_key=settings.gemini_api_key)
        engine = cls(
            EmbeddingModel(client, settings.embed_model, settings.embed_dim),
            VectorIndex.connect(settings.qdrant_url, settings.qdrant_api_key, settings.collection),
            ChatModel(client, settings.chat_model, settings.thinking_budget),
            top_k=settings.top_k,
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
        )
        logger.info(f"RAGEngine initialized | collection={settings.collection} | top_k={settings.top_k}")
        return engine

    async def close(self):
        await self.index.close()
        logger.info("RAGEngine resources closed")

    @log_latency("rag.ask_async")
    async def ask_async(self, query: str) -> str:
        logger.info(f"Query received | query_length={len(query)}")
        start = time.perf_counter()
        try:
            answer = await self._answer(query)
        except Exception:
            self.metrics.record_failure((time.perf_counter() - start) * 1000)
            raise
        self.metrics.record_answer(answer, (time.perf_counter() - start) * 1000)
        return answer

    async def _answer(self, query: str) -> str:
        query_embedding = await self.embedder.embed_async(query)

        matches = await self.index.query_async(query_embedding, top_k=self.top_k, include_metadata=True)
        logger.info(f"Retrieval complete | matches={len(matches)}")
        logger.debug(f"Retrieved context: {[m.text for m in matches]}")

        context = build_context(m.text for m in matches)
        if not context:
            logger.warning("No context retrieved, answering without it")

        answer = await self.chat.complete(
            build_messages(context, query),
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )
        logger.info(f"LLM response received | answer_length={len(answer)}")
        return answer
