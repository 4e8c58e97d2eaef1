"""
API Module - HTTP interface to the transducer engine.

Clients:
1. Submit rules to build a transducer
2. Parse single inputs or batches against it
3. Inspect graph statistics
4. Drop the transducer when done

All state is in-memory and scoped to the running process.
"""

from .schemas import (
    # Requests
    CreateTransducerRequest,
    ParseRequest,
    BatchParseRequest,
    # Responses
    TransducerResponse,
    TransducerListResponse,
    ParseResponse,
    BatchParseResponse,
    DeleteTransducerResponse,
    ErrorResponse,
    HealthResponse,
    # Shared
    StatsInfo,
    ParseResultInfo,
    ParseStatus,
    ErrorCode,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateTransducerRequest",
    "ParseRequest",
    "BatchParseRequest",
    # Responses
    "TransducerResponse",
    "TransducerListResponse",
    "ParseResponse",
    "BatchParseResponse",
    "DeleteTransducerResponse",
    "ErrorResponse",
    "HealthResponse",
    # Shared
    "StatsInfo",
    "ParseResultInfo",
    "ParseStatus",
    "ErrorCode",
    # Service
    "APIService",
    "create_app",
]
