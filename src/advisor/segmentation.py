"""Turn free-form model prose into the named fields of an advisory response.

Two strategies are offered. Positional splitting trusts the model to emit its
sections as blank-line separated paragraphs in the requested order.
Label-anchored extraction looks for an explicit section label such as
``LUNCH:`` and reads up to the next known label. Both are total: any input,
including an empty string, maps to a defined result.
"""

from __future__ import annotations

import re
from typing import Dict, List, Sequence


NO_INFORMATION = "No information available."
PARAGRAPH_DELIMITER = "\n\n"
MEAL_LABELS = ("BREAKFAST", "LUNCH", "DINNER", "SNACKS")

# Label punctuation ("LUNCH:", "- LUNCH -") and markdown markers ("**LUNCH:**").
_SECTION_TRIM_CHARS = ":-*# \t\r\n"


def split_into_sections(text: str, count: int) -> List[str]:
    if count <= 0:
        return []
    sections = [""] * count
    if not text:
        return sections

    for index, part in enumerate(text.split(PARAGRAPH_DELIMITER)[:count]):
        sections[index] = part.strip()
    return sections


def extract_section(text: str, label: str, labels: Sequence[str] = MEAL_LABELS) -> str:
    """Return the text following ``label`` up to the next known label.

    Matching is case-insensitive and the first occurrence of ``label`` wins.
    The content is cut at the earliest occurrence of any other label, so a
    label word that happens to appear inside prose truncates the section.
    """
    if not text or not label:
        return NO_INFORMATION

    match = _find_label(text, label)
    if match is None:
        return NO_INFORMATION

    content = text[match.end() :]
    cut = len(content)
    for other in labels:
        if other.upper() == label.upper():
            continue
        other_match = _find_label(content, other)
        if other_match is not None and other_match.start() < cut:
            cut = other_match.start()

    cleaned = content[:cut].strip(_SECTION_TRIM_CHARS)
    return cleaned or NO_INFORMATION


def parse_meal_sections(text: str) -> Dict[str, str]:
    return {label.lower(): extract_section(text, label, MEAL_LABELS) for label in MEAL_LABELS}


def _find_label(text: str, label: str) -> re.Match[str] | None:
    return re.search(re.escape(label), text, flags=re.IGNORECASE)
