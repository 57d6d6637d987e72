"""Advice provider backed by litellm.

One completion per request; retries are delegated to litellm's num_retries.
"""

from __future__ import annotations

from typing import Any

import litellm
import structlog

from ..core.constants import DEFAULT_ADVISOR_MODEL, DEFAULT_ADVISOR_TIMEOUT_SECONDS
from .base import AdviceProvider

logger = structlog.get_logger()

# Silence litellm's noisy default logging
litellm.suppress_debug_info = True


class LiteLLMAdviceProvider(AdviceProvider):
    def __init__(
        self,
        *,
        model: str = DEFAULT_ADVISOR_MODEL,
        timeout: int = DEFAULT_ADVISOR_TIMEOUT_SECONDS,
        num_retries: int = 1,
        **completion_kwargs: Any,
    ):
        self._model = model
        self._timeout = timeout
        self._num_retries = num_retries
        self._completion_kwargs = completion_kwargs

    def generate(self, prompt: str) -> str:
        response = litellm.completion(
            model=self._model,
            messages=[{"role": "user", "content": prompt}],
            timeout=self._timeout,
            num_retries=self._num_retries,
            **self._completion_kwargs,
        )
        content: str = response.choices[0].message.content or ""

        logger.debug("advice_generated", model=self._model, chars=len(content))
        return content
