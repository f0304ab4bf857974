"""
Uniform response envelope for external collaborator calls.

Every client method returns a ``ServiceResponse``.  When the upstream
service fails, ``success`` is False, ``error`` says why and ``data`` still
carries mock data, so callers can always render something.
"""

from __future__ import annotations

import time
import uuid
from datetime import datetime, timezone
from typing import Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

API_VERSION = "1.0"


class ServiceError(BaseModel):
    code: str
    message: str


class ResponseMetadata(BaseModel):
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    request_id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    processing_time_ms: float = 0.0
    version: str = API_VERSION
    source: Literal["live", "mock"] = "live"


class ServiceResponse(BaseModel, Generic[T]):
    success: bool
    data: Optional[T] = None
    error: Optional[ServiceError] = None
    metadata: ResponseMetadata = Field(default_factory=ResponseMetadata)

    @classmethod
    def live(cls, data: T, started: float) -> "ServiceResponse[T]":
        return cls(success=True, data=data, metadata=_metadata(started, "live"))

    @classmethod
    def mock(cls, data: T, started: float) -> "ServiceResponse[T]":
        return cls(success=True, data=data, metadata=_metadata(started, "mock"))

    @classmethod
    def fallback(
        cls, data: T, started: float, code: str, message: str
    ) -> "ServiceResponse[T]":
        return cls(
            success=False,
            data=data,
            error=ServiceError(code=code, message=message),
            metadata=_metadata(started, "mock"),
        )


def _metadata(started: float, source: Literal["live", "mock"]) -> ResponseMetadata:
    return ResponseMetadata(
        processing_time_ms=round((time.perf_counter() - started) * 1000, 2),
        source=source,
    )
