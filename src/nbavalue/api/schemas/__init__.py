"""Pydantic models for API I/O."""

from .valuation import (
    BatchValuationRequest,
    BatchValuationResponse,
    CompensationRecordResponse,
    PlayerHistoryPayload,
    ReloadResponse,
    ValuationRequest,
)

__all__ = [
    "BatchValuationRequest",
    "BatchValuationResponse",
    "CompensationRecordResponse",
    "PlayerHistoryPayload",
    "ReloadResponse",
    "ValuationRequest",
]
