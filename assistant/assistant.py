from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder
from langchain_core.runnables import Runnable
from langchain_google_genai import ChatGoogleGenerativeAI

from assistant.core.messages import ChatTurn, UsageDelta
from assistant.core.prompt import SYSTEM_PROMPT
from config.settings import get_settings


def build_chat_model() -> BaseChatModel:
    settings = get_settings()
    if not settings.google_api_key:
        raise RuntimeError(
            "GOOGLE_API_KEY not set. Please configure it in environment or .env"
        )

    # One attempt per request; the timeout bounds how long a request can hang.
    return ChatGoogleGenerativeAI(
        model=settings.gemini_model,
        google_api_key=settings.google_api_key,
        temperature=settings.temperature,
        top_p=settings.top_p,
        timeout=settings.model_timeout,
        max_retries=0,
    )


def build_chain(llm: BaseChatModel) -> Runnable:
    prompt = ChatPromptTemplate.from_messages(
        [
            ("system", SYSTEM_PROMPT),
            MessagesPlaceholder("messages"),
        ]
    )
    return prompt | llm


def to_lc_messages(turns: List[ChatTurn]) -> Tuple[List[BaseMessage], Optional[ChatTurn]]:
    """Map client turns onto LangChain messages, one to one and in order.

    Also returns the last human turn, or None when there is none.
    """
    messages: List[BaseMessage] = []
    last_human: Optional[ChatTurn] = None
    for turn in turns:
        if turn.role == "human":
            last_human = turn
            messages.append(HumanMessage(content=turn.text))
        elif turn.role == "ai":
            messages.append(AIMessage(content=turn.text))
        elif turn.role == "system":
            messages.append(SystemMessage(content=turn.text))
        else:
            raise ValueError(f"Unknown chat role: {turn.role!r}")
    return messages, last_human


def _as_int(value: Any) -> int:
    try:
        return max(int(value or 0), 0)
    except (TypeError, ValueError):
        return 0


def extract_usage(message: BaseMessage) -> UsageDelta:
    usage = getattr(message, "usage_metadata", None)
    if usage:
        return UsageDelta(
            prompt_tokens=_as_int(usage.get("input_tokens")),
            completion_tokens=_as_int(usage.get("output_tokens")),
        )

    metadata: Dict[str, Any] = getattr(message, "response_metadata", None) or {}
    token_usage = metadata.get("token_usage") or metadata.get("tokenUsage")
    if isinstance(token_usage, dict):
        return UsageDelta(
            prompt_tokens=_as_int(
                token_usage.get("prompt_tokens", token_usage.get("promptTokens"))
            ),
            completion_tokens=_as_int(
                token_usage.get("completion_tokens", token_usage.get("completionTokens"))
            ),
        )

    gemini_usage = metadata.get("usage_metadata")
    if isinstance(gemini_usage, dict):
        return UsageDelta(
            prompt_tokens=_as_int(gemini_usage.get("prompt_token_count")),
            completion_tokens=_as_int(gemini_usage.get("candidates_token_count")),
        )

    return UsageDelta()


@dataclass(frozen=True)
class ModelReply:
    message: AIMessage
    usage: UsageDelta

    @property
    def text(self) -> str:
        content = self.message.content
        if isinstance(content, str):
            return content
        # Multi-part content: keep the text parts only.
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text") or "")
        return "".join(parts)


def invoke_chain(llm: BaseChatModel, messages: List[BaseMessage]) -> ModelReply:
    result = build_chain(llm).invoke({"messages": messages})
    if not isinstance(result, AIMessage):
        result = AIMessage(content=getattr(result, "content", str(result)))
    return ModelReply(message=result, usage=extract_usage(result))
