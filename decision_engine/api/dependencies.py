"""Dependency injection for FastAPI endpoints"""

from typing import Mapping

from fastapi import Request

from decision_engine.config import settings
from decision_engine.domain.models import CreditSegment
from decision_engine.domain.segmentation import DEFAULT_SEGMENT_OVERRIDES


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_segment_overrides() -> Mapping[str, CreditSegment]:
    """Provide the fixed personal code to segment table, or none if disabled"""
    if not settings.segment_overrides_enabled:
        return {}
    return DEFAULT_SEGMENT_OVERRIDES
