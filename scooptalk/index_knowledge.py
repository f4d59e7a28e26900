"""One-shot ingestion: embeds the ice cream knowledge base and upserts it into Qdrant."""

import logging
import sys
from dataclasses import dataclass, field
from typing import List, Sequence

from google import genai

from scooptalk.config import Settings
from scooptalk.embeddings import EmbeddingModel
from scooptalk.logging_config import setup_logging
from scooptalk.vector_index import VectorIndex

logger = logging.getLogger(__name__)

KNOWLEDGE_BASE = [
    "We sell Vanilla ice cream. classic flavour, smooth and creamy.",
    "We sell Chocolate ice cream. is rich and sweet, made from cocoa.",
    "We sell Strawberry ice cream. has a fruity taste, usually pink in colour.",
    "We sell Mint chocolate chip ice cream. it is green, flavoured with mint and chocolate chips.",
    "We sell Cookies and cream ice cream. it is made with chunks of oreo in vanilla ice cream.",
]

KEY_PREFIX = "flavour"


@dataclass
class IngestReport:
    inserted: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


def ingest(
    entries: Sequence[str],
    embedder: EmbeddingModel,
    index: VectorIndex,
    prefix: str = KEY_PREFIX,
) -> IngestReport:
    """Embed and upsert each entry as ``<prefix>-<i>``; a failing entry is logged and skipped."""
    report = IngestReport()

    for i, text in enumerate(entries):
        key = f"{prefix}-{i}"
        try:
            vector = embedder.embed(text)
            index.upsert(key, vector, {"text": text})
        except Exception:
            logger.exception(f"Failed to insert | key={key} | text={text!r}")
            report.failed.append(key)
            continue

        logger.info(f"Inserted | key={key} | text={text!r}")
        report.inserted.append(key)

    return report


def main() -> int:
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    client = genai.Client(api_key=settings.gemini_api_key)
    embedder = EmbeddingModel(client, settings.embed_model, settings.embed_dim)
    index = VectorIndex.connect(
        settings.qdrant_url, settings.qdrant_api_key, settings.collection, use_async=False
    )

    print(f"Starting ingestion into collection '{settings.collection}'...")

    try:
        if index.ensure_collection(settings.embed_dim):
            print(f"Created collection '{settings.collection}'")

        report = ingest(KNOWLEDGE_BASE, embedder, index)
    finally:
        index.client.close()

    print(f"Indexed {len(report.inserted)} / {len(KNOWLEDGE_BASE)} entries")
    if report.failed:
        print(f"Failed: {', '.join(report.failed)}")

    return 1 if not report.inserted else 0


if __name__ == "__main__":
    sys.exit(main())
