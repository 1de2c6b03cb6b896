import sys
from pathlib import Path
from typing import Any, List, Optional, Union

import pytest
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.outputs import ChatGeneration, ChatResult
from pydantic import Field

# Ensure the repository root is on the path for imports
root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(root))

from assistant.core.usage import token_accountant  # noqa: E402


class RecordingChatModel(BaseChatModel):
    """Deterministic chat model that remembers every prompt it was given."""

    reply: Union[str, List[Any]] = "De auto is blauw."
    prompt_tokens: int = 12
    completion_tokens: int = 5
    fail: bool = False
    calls: List[List[BaseMessage]] = Field(default_factory=list)

    @property
    def _llm_type(self) -> str:
        return "recording-fake"

    def _generate(
        self,
        messages: List[BaseMessage],
        stop: Optional[List[str]] = None,
        run_manager: Any = None,
        **kwargs: Any,
    ) -> ChatResult:
        if self.fail:
            raise RuntimeError("upstream model outage")
        self.calls.append(list(messages))
        message = AIMessage(
            content=self.reply,
            usage_metadata={
                "input_tokens": self.prompt_tokens,
                "output_tokens": self.completion_tokens,
                "total_tokens": self.prompt_tokens + self.completion_tokens,
            },
        )
        return ChatResult(generations=[ChatGeneration(message=message)])


@pytest.fixture
def fake_llm() -> RecordingChatModel:
    return RecordingChatModel()


@pytest.fixture(autouse=True)
def _reset_token_usage():
    token_accountant.reset()
    yield
    token_accountant.reset()
