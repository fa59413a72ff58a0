from __future__ import annotations

from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from advisor.schemas import AdvisoryRequest, AdvisoryResponse


RequestT = TypeVar("RequestT", bound=AdvisoryRequest)
ResponseT = TypeVar("ResponseT", bound=AdvisoryResponse)


class AdvisoryEnvelope(BaseModel, Generic[RequestT]):
    data: RequestT


class AdvisoryResult(BaseModel, Generic[ResponseT]):
    result: ResponseT


class AdvisoryCategorySchema(BaseModel):
    id: str
    name: str
    path: str
    description: str


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: str = Field(default_factory=lambda: datetime.now(tz=timezone.utc).isoformat())
