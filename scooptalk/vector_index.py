"""Qdrant-backed vector index keyed by human-readable entry identifiers."""

import uuid
from dataclasses import dataclass
from typing import Dict, List, Optional

from qdrant_client import AsyncQdrantClient, QdrantClient
from qdrant_client.models import Distance, PointStruct, VectorParams

NAMESPACE_SCOOPTALK = uuid.UUID("6ba7b810-9dad-11d1-80b4-00c04fd430c8")


def point_id(key: str) -> str:
    """Qdrant only accepts UUIDs or unsigned ints; re-upserting a key hits the same point."""
    return str(uuid.uuid5(NAMESPACE_SCOOPTALK, key))


@dataclass
class Match:
    text: Optional[str]
    score: float
    key: Optional[str] = None


def _to_matches(points) -> List[Match]:
    matches = []
    for p in points:
        payload = p.payload or {}
        matches.append(Match(text=payload.get("text"), score=p.score, key=payload.get("key")))
    return matches


class VectorIndex:
    def __init__(
        self,
        collection_name: str,
        *,
        client: Optional[QdrantClient] = None,
        async_client: Optional[AsyncQdrantClient] = None,
    ):
        self.collection_name = collection_name
        self.client = client
        self.async_client = async_client

    @classmethod
    def connect(cls, url: str, api_key: str, collection_name: str, *, use_async: bool = True) -> "VectorIndex":
        if use_async:
            return cls(collection_name, async_client=AsyncQdrantClient(url=url, api_key=api_key))
        return cls(collection_name, client=QdrantClient(url=url, api_key=api_key))

    def ensure_collection(self, vector_size: int) -> bool:
        """Create the collection if missing. Returns True when it was created."""
        if self.client.collection_exists(self.collection_name):
            return False
        self.client.create_collection(
            collection_name=self.collection_name,
            vectors_config=VectorParams(size=vector_size, distance=Distance.COSINE),
        )
        return True

    def upsert(self, key: str, vector: List[float], metadata: Dict) -> None:
        self.client.upsert(
            collection_name=self.collection_name,
            points=[PointStruct(id=point_id(key), vector=vector, payload={**metadata, "key": key})],
        )

    def query(self, vector: List[float], top_k: int = 5, include_metadata: bool = True) -> List[Match]:
        result = self.client.query_points(
            collection_name=self.collection_name,
            query=vector,
            limit=top_k,
            with_payload=include_metadata,
        )
        return _to_matches(result.points)

    async def query_async(
        self, vector: List[float], top_k: int = 5, include_metadata: bool = True
    ) -> List[Match]:
        result = await self.async_client.query_points(
            collection_name=self.collection_name,
            query=vector,
            limit=top_k,
            with_payload=include_metadata,
        )
        return _to_matches(result.points)

    async def close(self):
        if self.async_client is not None:
            await self.async_client.close()
        if self.client is not None:
            self.client.close()
