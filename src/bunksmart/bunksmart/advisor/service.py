from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional, Sequence

import structlog

from ..core.constants import ADVICE_FALLBACK
from ..metrics.calculator.base import MetricsCalculator
from ..metrics.calculator.standard_calculator import StandardMetricsCalculator
from ..subjects.model import Subject
from .base import AdviceProvider

logger = structlog.get_logger()

PROMPT_TEMPLATE = """Act as a "Bunking Consultant" for a student.
Their target attendance is {target}%.
Here is their current attendance data:
{data}

Provide a short, witty, and motivating analysis (max 100 words).
Tell them which subjects they can afford to relax in and where they are in "danger zone".
Be supportive but honest about their academic risks. Use emojis."""


@dataclass(frozen=True)
class Advice:
    text: str
    is_fallback: bool


class AdvisorService:
    """Use case: free-text guidance from a read-only metrics snapshot.

    Provider failures never propagate; the caller gets ADVICE_FALLBACK instead.
    """

    def __init__(
        self,
        provider: AdviceProvider,
        *,
        calculator: Optional[MetricsCalculator] = None,
        fallback: str = ADVICE_FALLBACK,
    ):
        self._provider = provider
        self._calculator = calculator or StandardMetricsCalculator()
        self._fallback = fallback

    def build_snapshot(self, subjects: Sequence[Subject], target: float) -> list[dict]:
        snapshot = []
        for s in subjects:
            m = self._calculator.for_subject(s, target)
            snapshot.append(
                {
                    "name": s.name,
                    "percentage": f"{m.percentage:.1f}",
                    "safeToBunk": m.safe_to_bunk,
                    "mustAttend": m.must_attend,
                    "total": m.total,
                }
            )
        return snapshot

    def build_prompt(self, subjects: Sequence[Subject], target: float) -> str:
        data = json.dumps(self.build_snapshot(subjects, target), indent=2, ensure_ascii=False)
        return PROMPT_TEMPLATE.format(target=f"{target:g}", data=data)

    def get_advice(self, subjects: Sequence[Subject], target: float) -> Advice:
        if not subjects:
            return Advice(text=self._fallback, is_fallback=True)

        prompt = self.build_prompt(subjects, target)
        try:
            text = self._provider.generate(prompt)
        except Exception as e:
            logger.warning("advice_failed", error=str(e), error_type=type(e).__name__)
            return Advice(text=self._fallback, is_fallback=True)

        text = (text or "").strip()
        if not text:
            logger.warning("advice_empty")
            return Advice(text=self._fallback, is_fallback=True)
        return Advice(text=text, is_fallback=False)
