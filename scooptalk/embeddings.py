"""Gemini embedding wrapper with L2 normalization for consistent similarity scoring."""

from typing import List

import numpy as np
from google import genai
from google.genai import types


class EmbeddingModel:
    def __init__(
        self,
        client: genai.Client,
        model_name: str = "gemini-embedding-001",
        dimensions: int = 3072,
    ):
        self.client = client
        self.model_name = model_name
        self.dimensions = dimensions
        self._config = types.EmbedContentConfig(output_dimensionality=dimensions)

    @staticmethod
    def _to_vector(response, normalize: bool) -> List[float]:
        embedding = np.asarray(response.embeddings[0].values, dtype=np.float64)
        if normalize:
            norm = np.linalg.norm(embedding)
            if norm > 0:
                embedding = embedding / norm
        return embedding.tolist()

    def embed(self, text: str, normalize: bool = True) -> List[float]:
        response = self.client.models.embed_content(
            model=self.model_name,
            contents=text,
            config=self._config,
        )
        return self._to_vector(response, normalize)

    async def embed_async(self, text: str, normalize: bool = True) -> List[float]:
        response = await self.client.aio.models.embed_content(
            model=self.model_name,
            contents=text,
            config=self._config,
        )
        return self._to_vector(response, normalize)
