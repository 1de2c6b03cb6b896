from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from assistant.assistant import build_chat_model
from assistant.core.messages import ChatTurn
from assistant.core.prompt import ERROR_MESSAGE, SMOKE_TEST_QUESTION
from assistant.core.usage import token_accountant
from assistant.pipeline import run_conversation
from assistant.tools import fetch_rdw_data
from config.settings import get_settings


settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="[%(asctime)s] %(levelname)s - %(message)s",
)
logger = logging.getLogger("kenteken")

app = FastAPI(title="Kenteken Assistant", version="1.0.0")

# CORS: allow local frontend during development
if settings.app_env.lower() in {"dev", "development", "local"}:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


class ChatRequest(BaseModel):
    chat_history: List[ChatTurn] = Field(
        ...,
        alias="chatHistory",
        description="Full conversation so far (client-managed), oldest first",
    )


def _error_response() -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": ERROR_MESSAGE})


@app.post("/api/postData")
def post_data(req: ChatRequest) -> Any:
    try:
        logger.info("Incoming chat: history_turns=%s", len(req.chat_history))
        llm = build_chat_model()
        result = run_conversation(
            req.chat_history,
            llm,
            token_accountant,
            lookup=fetch_rdw_data,
        )
        logger.info(
            "Cumulative token usage: %s", result.token_usage.to_dict()
        )
        return result.to_payload()
    except Exception as e:
        logger.exception("Chat processing failed: %s", e)
        return _error_response()


@app.get("/api/testchain")
def test_chain() -> Any:
    """Smoke test: answer a fixed plate question through the full pipeline."""
    try:
        llm = build_chat_model()
        result = run_conversation(
            [ChatTurn(role="human", text=SMOKE_TEST_QUESTION)],
            llm,
            None,
            lookup=fetch_rdw_data,
        )
    except Exception as e:
        logger.exception("Test chain failed: %s", e)
        return _error_response()

    body: Dict[str, Any] = {
        "question": SMOKE_TEST_QUESTION,
        "answer": result.reply_text,
        "chatHistory": [turn.model_dump() for turn in result.chat_history],
    }
    return {"result": body}


@app.get("/health")
def health():
    return {"status": "ok"}
