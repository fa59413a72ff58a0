from __future__ import annotations

from typing import Optional

from typing_extensions import TypedDict

from advisor.schemas import AdvisoryRequest, AdvisoryResponse


class AdvisoryState(TypedDict):
    category_id: str
    request: AdvisoryRequest
    prompt: str
    raw_text: str
    response: Optional[AdvisoryResponse]
