from __future__ import annotations

from typing import Iterable, Sequence, Tuple


LOW_THRESHOLD = 70.0
HIGH_THRESHOLD = 180.0
CRITICAL_THRESHOLD = 250.0

# Checked in order; the first level with a matching keyword wins.
URGENCY_KEYWORDS: Sequence[Tuple[str, Tuple[str, ...]]] = (
    ("emergency", ("emergency", "911", "immediate", "urgent care")),
    ("urgent", ("urgent", "contact doctor", "today")),
)
DEFAULT_URGENCY = "routine"


def classify_blood_sugar(reading: float) -> str:
    if reading < LOW_THRESHOLD:
        return "low"
    if reading > CRITICAL_THRESHOLD:
        return "critical"
    if reading > HIGH_THRESHOLD:
        return "high"
    return "normal"


def contains_keywords(text: str, keywords: Iterable[str]) -> bool:
    if not text:
        return False
    lowered = text.lower()
    return any(keyword and keyword.lower() in lowered for keyword in keywords)


def classify_urgency(
    text: str,
    levels: Sequence[Tuple[str, Tuple[str, ...]]] = URGENCY_KEYWORDS,
    default: str = DEFAULT_URGENCY,
) -> str:
    for level, keywords in levels:
        if contains_keywords(text, keywords):
            return level
    return default
