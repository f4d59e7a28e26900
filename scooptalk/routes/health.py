"""Health check with in-process query counters."""

from fastapi import APIRouter, Depends

from scooptalk.rag import RAGEngine
from scooptalk.routes.query import get_rag_engine

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(rag: RAGEngine = Depends(get_rag_engine)):
    return {"status": "ok", "queries": rag.metrics.get_stats()}
