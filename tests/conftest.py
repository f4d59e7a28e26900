from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from scooptalk.main import app
from scooptalk.rag import RAGEngine
from scooptalk.routes.ask import get_browser
from scooptalk.routes.query import get_rag_engine
from scooptalk.vector_index import Match


class FakeEmbedder:
    def __init__(self, fail_on=()):
        self.fail_on = set(fail_on)
        self.calls = []

    def _vector(self, text):
        self.calls.append(text)
        if text in self.fail_on:
            raise RuntimeError(f"embedding failed for {text!r}")
        return [float(len(text)), 1.0, 0.0]

    def embed(self, text):
        return self._vector(text)

    async def embed_async(self, text):
        return self._vector(text)


class FakeIndex:
    def __init__(self, matches=(), fail_on_keys=()):
        self.matches = list(matches)
        self.fail_on_keys = set(fail_on_keys)
        self.upserts = []
        self.queries = []

    def upsert(self, key, vector, metadata):
        if key in self.fail_on_keys:
            raise RuntimeError(f"upsert failed for {key}")
        self.upserts.append((key, vector, metadata))

    async def query_async(self, vector, top_k=5, include_metadata=True):
        self.queries.append((vector, top_k, include_metadata))
        return self.matches

    async def close(self):
        pass


class FakeChat:
    def __init__(self, answer="We have five flavours."):
        self.answer = answer
        self.calls = []

    async def complete(self, messages, *, max_tokens, temperature):
        self.calls.append({"messages": messages, "max_tokens": max_tokens, "temperature": temperature})
        return self.answer


class FakeBrowser:
    def __init__(self, reply="It is sunny.", error=None):
        self.reply_text = reply
        self.error = error
        self.calls = []

    async def reply(self, text):
        self.calls.append(text)
        if self.error:
            raise self.error
        return self.reply_text


def flavour_matches():
    return [
        Match(text="We sell Vanilla ice cream.", score=0.91, key="flavour-0"),
        Match(text=None, score=0.80, key="flavour-9"),
        Match(text="We sell Chocolate ice cream.", score=0.75, key="flavour-1"),
    ]


@pytest.fixture
def embedder():
    return FakeEmbedder()


@pytest.fixture
def index():
    return FakeIndex(flavour_matches())


@pytest.fixture
def chat():
    return FakeChat()


@pytest.fixture
def browser():
    return FakeBrowser()


@pytest.fixture
def engine(embedder, index, chat):
    return RAGEngine(embedder, index, chat)


@pytest.fixture
def client(engine, browser):
    app.dependency_overrides[get_rag_engine] = lambda: engine
    app.dependency_overrides[get_browser] = lambda: browser
    yield TestClient(app)
    app.dependency_overrides.clear()


class FakeAsyncModels:
    def __init__(self, embed_response=None, generate_response=None):
        self.embed_response = embed_response
        self.generate_response = generate_response
        self.calls = []

    async def embed_content(self, **kwargs):
        self.calls.append(("embed_content", kwargs))
        return self.embed_response

    async def generate_content(self, **kwargs):
        self.calls.append(("generate_content", kwargs))
        return self.generate_response


class FakeModels:
    def __init__(self, embed_response=None):
        self.embed_response = embed_response
        self.calls = []

    def embed_content(self, **kwargs):
        self.calls.append(("embed_content", kwargs))
        return self.embed_response


def fake_genai_client(embed_values=None, generate_response=None):
    embed_response = None
    if embed_values is not None:
        embed_response = SimpleNamespace(embeddings=[SimpleNamespace(values=embed_values)])
    return SimpleNamespace(
        models=FakeModels(embed_response),
        aio=SimpleNamespace(models=FakeAsyncModels(embed_response, generate_response)),
    )
