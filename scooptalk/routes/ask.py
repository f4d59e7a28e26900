"""Web-search backed passthrough endpoint."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from scooptalk.browsing import BrowsingAgent

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ask"])


class AskRequest(BaseModel):
    text: str = ""


async def get_browser(request: Request) -> BrowsingAgent:
    return request.app.state.browser


@router.post("/ask")
async def ask(req: AskRequest, browser: BrowsingAgent = Depends(get_browser)):
    if not req.text.strip():
        return JSONResponse(status_code=400, content={"error": "No text provided to LLM"})

    try:
        reply = await browser.reply(req.text)
    except Exception:
        logger.exception("Browsing LLM request failed")
        return JSONResponse(status_code=500, content={"error": "LLM request failed"})

    return {"reply": reply}
