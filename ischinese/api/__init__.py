"""
API 路由层
"""
from .routes import router
from .schemas import (
    DetectRequest,
    DetectResponse,
    DetectResult,
    BatchDetectRequest,
    BatchDetectResponse,
    HealthResponse,
    ErrorResponse
)

__all__ = [
    "router",
    "DetectRequest",
    "DetectResponse",
    "DetectResult",
    "BatchDetectRequest",
    "BatchDetectResponse",
    "HealthResponse",
    "ErrorResponse"
]
