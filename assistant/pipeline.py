from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.load import dumpd
from langchain_core.messages import AIMessage, SystemMessage

from assistant.assistant import invoke_chain, to_lc_messages
from assistant.core.messages import ChatTurn, LookupResult, TokenUsage
from assistant.core.usage import TokenAccountant
from assistant.tools import build_enrichment_turn, fetch_rdw_data, find_license_plate


logger = logging.getLogger("kenteken.pipeline")

Lookup = Callable[[str], LookupResult]


@dataclass
class ConversationResult:
    reply: AIMessage
    reply_text: str
    chat_history: List[ChatTurn]
    assistant_turn: ChatTurn
    token_usage: TokenUsage
    plate: Optional[str] = None
    lookup: Optional[LookupResult] = None

    def to_payload(self) -> Dict[str, Any]:
        response = dumpd(self.reply)
        # Multi-part replies go out flattened to plain text.
        response["kwargs"]["content"] = self.reply_text
        # chatHistory stops before the reply; the client appends it itself.
        return {
            "response": response,
            "chatHistory": [turn.model_dump() for turn in self.chat_history],
            "tokenUsage": self.token_usage.to_dict(),
        }


def run_conversation(
    turns: List[ChatTurn],
    llm: BaseChatModel,
    accountant: Optional[TokenAccountant],
    lookup: Lookup = fetch_rdw_data,
) -> ConversationResult:
    """Enrich, invoke the model once and account for its usage.

    With ``accountant=None`` the usage of this call is reported on its own and
    the shared total is left untouched.
    """
    chat_history = list(turns)
    messages, last_human = to_lc_messages(chat_history)

    plate: Optional[str] = None
    lookup_result: Optional[LookupResult] = None
    if last_human is not None:
        plate = find_license_plate(last_human.text)
    if plate:
        lookup_result = lookup(plate)
        enrichment = build_enrichment_turn(plate, lookup_result)
        messages.append(SystemMessage(content=enrichment.text))
        chat_history.append(enrichment)
        logger.info("Enriched plate=%s status=%s", plate, lookup_result.status)
    else:
        logger.info("No license plate in last human turn; skipping enrichment")

    reply = invoke_chain(llm, messages)
    if accountant is not None:
        usage = accountant.add(reply.usage)
    else:
        usage = TokenUsage(
            prompt_tokens=reply.usage.prompt_tokens,
            completion_tokens=reply.usage.completion_tokens,
        )
    logger.info(
        "Model responded with %s chars (prompt=%s completion=%s)",
        len(reply.text),
        reply.usage.prompt_tokens,
        reply.usage.completion_tokens,
    )

    return ConversationResult(
        reply=reply.message,
        reply_text=reply.text,
        chat_history=chat_history,
        assistant_turn=ChatTurn(role="ai", text=reply.text),
        token_usage=usage,
        plate=plate,
        lookup=lookup_result,
    )
