from __future__ import annotations

from abc import ABC, abstractmethod


class AdviceProvider(ABC):
    """Port: turn a prompt into free-text advice. May raise on network/timeout errors."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        raise NotImplementedError


class StaticAdviceProvider(AdviceProvider):
    """Always answers with the same text (advisor disabled, offline demos)."""

    def __init__(self, text: str):
        self._text = text

    def generate(self, prompt: str) -> str:
        return self._text
