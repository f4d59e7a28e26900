"""FastAPI application entrypoint with RAG engine lifecycle management."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from google import genai

from scooptalk.browsing import BrowsingAgent
from scooptalk.config import Settings
from scooptalk.logging_config import setup_logging
from scooptalk.rag import RAGEngine
from scooptalk.routes import ask_router, health_router, query_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    client = genai.Client(api_key=settings.gemini_api_key)
    app.state.rag = RAGEngine.from_settings(settings, client=client)
    app.state.browser = BrowsingAgent(client, settings.browse_model)
    yield
    await app.state.rag.close()


app = FastAPI(title="Scooptalk", lifespan=lifespan)
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

app.include_router(health_router)
app.include_router(query_router)
app.include_router(ask_router)


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'][1:])}: {err['msg']}" for err in exc.errors()
    )
    return JSONResponse(status_code=422, content={"error": f"Invalid request body: {details}"})


@app.get("/")
async def root():
    return RedirectResponse(url="/docs")


def run():
    uvicorn.run("scooptalk.main:app", host="0.0.0.0", port=3000)


if __name__ == "__main__":
    run()
