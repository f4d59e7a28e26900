"""RAG question answering endpoint."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from scooptalk.rag import RAGEngine

logger = logging.getLogger(__name__)

router = APIRouter(tags=["query"])


class Query(BaseModel):
    query: str = ""


async def get_rag_engine(request: Request) -> RAGEngine:
    return request.app.state.rag


@router.post("/query")
async def query(q: Query, rag: RAGEngine = Depends(get_rag_engine)):
    if not q.query.strip():
        return JSONResponse(status_code=400, content={"error": "No query provided"})

    try:
        answer = await rag.ask_async(q.query)
    except Exception as e:
        logger.exception("Query failed")
        return JSONResponse(status_code=500, content={"error": str(e)})

    return {"answer": answer}
