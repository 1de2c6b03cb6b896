from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


Role = Literal["human", "ai", "system"]


class ChatTurn(BaseModel):
    # Client-side keys (ids, timestamps) travel back untouched.
    model_config = ConfigDict(extra="allow")

    role: Role = Field(..., description="'human', 'ai' or 'system'")
    text: str


@dataclass(frozen=True)
class UsageDelta:
    """Token counts reported for a single model call."""

    prompt_tokens: int = 0
    completion_tokens: int = 0


@dataclass(frozen=True)
class TokenUsage:
    prompt_tokens: int = 0
    completion_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens

    def to_dict(self) -> Dict[str, int]:
        return {
            "promptTokens": self.prompt_tokens,
            "completionTokens": self.completion_tokens,
            "totalTokens": self.total_tokens,
        }


LookupStatus = Literal["found", "not_found", "transport_error"]


@dataclass(frozen=True)
class LookupResult:
    """Outcome of one registry lookup.

    ``record`` is only set for ``found``; ``error`` only for ``transport_error``.
    """

    status: LookupStatus
    record: Any = None
    error: Optional[str] = None

    @classmethod
    def found(cls, record: Any) -> "LookupResult":
        return cls(status="found", record=record)

    @classmethod
    def not_found(cls) -> "LookupResult":
        return cls(status="not_found")

    @classmethod
    def transport_error(cls, error: str) -> "LookupResult":
        return cls(status="transport_error", error=error)
