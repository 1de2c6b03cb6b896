from __future__ import annotations

import threading

from assistant.core.messages import TokenUsage, UsageDelta


class TokenAccountant:
    """Process-wide running total of model token usage.

    Requests run concurrently in the server thread pool, so every update goes
    through the lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._usage = TokenUsage()

    def add(self, delta: UsageDelta) -> TokenUsage:
        if delta.prompt_tokens < 0 or delta.completion_tokens < 0:
            raise ValueError(f"Token counts cannot be negative: {delta}")
        with self._lock:
            self._usage = TokenUsage(
                prompt_tokens=self._usage.prompt_tokens + delta.prompt_tokens,
                completion_tokens=self._usage.completion_tokens + delta.completion_tokens,
            )
            return self._usage

    def snapshot(self) -> TokenUsage:
        with self._lock:
            return self._usage

    def reset(self) -> None:
        with self._lock:
            self._usage = TokenUsage()


token_accountant = TokenAccountant()
