"""
Shared fixtures.

The storefront context endpoint and the chat backend are simulated by one small
FastAPI app that records every call it receives, mounted through httpx.ASGITransport.
"""
import httpx
import pytest
from fastapi import FastAPI
from fastapi.responses import JSONResponse, PlainTextResponse

from schemas.chat import ChatRequest
from schemas.config import WidgetConfig

SHOP_URL = "http://shop.test"
API_ENDPOINT = "http://shop.test/chat/"


def create_fake_storefront() -> FastAPI:
    app = FastAPI()
    app.state.calls = []
    app.state.tokens = ["T1"]
    app.state.context_status = 200
    app.state.chat_status = 200
    app.state.chat_reply = {"message": "Hello!", "type": "text"}
    app.state.chat_requests = []

    @app.get("/agentic-ai/context")
    async def context():
        app.state.calls.append("context")
        if app.state.context_status != 200:
            return JSONResponse({"error": "unavailable"}, status_code=app.state.context_status)
        # Serve queued tokens in order, repeating the last one
        tokens = app.state.tokens
        token = tokens.pop(0) if len(tokens) > 1 else tokens[0]
        return {"token": token}

    @app.post("/chat/")
    async def chat(request: ChatRequest):
        app.state.calls.append("chat")
        app.state.chat_requests.append(request.model_dump(exclude_none=True))
        reply = app.state.chat_reply
        if isinstance(reply, str):
            return PlainTextResponse(reply, status_code=app.state.chat_status)
        return JSONResponse(reply, status_code=app.state.chat_status)

    return app


@pytest.fixture()
def config():
    return WidgetConfig(
        enabled=True,
        apiEndpoint=API_ENDPOINT,
        swAccessKey="SWSCTESTKEY",
        shopUrl=SHOP_URL,
    )


@pytest.fixture()
def storefront():
    return create_fake_storefront()


@pytest.fixture()
def http_client(storefront):
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=storefront))


@pytest.fixture()
def failed_requests():
    return []


@pytest.fixture()
def failing_client(failed_requests):
    """A client whose every request fails at the transport level."""

    def handler(request: httpx.Request) -> httpx.Response:
        failed_requests.append(request.url.path)
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
