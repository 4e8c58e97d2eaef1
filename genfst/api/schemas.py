"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between HTTP clients and the engine.
All responses include explicit types for OpenAPI schema generation.

Rule items on the wire are either a string (literal text) or a
two-element array [source, destination] (transformation):

    {"rules": [["play", ["s", "^s"]], ["act", ["ing", ""]]]}

Error Codes:
- TRANSDUCER_NOT_FOUND: Transducer does not exist or was deleted
- INVALID_RULE: A submitted rule is malformed
- VALIDATION_ERROR: Request body failed validation
"""

from enum import Enum
from typing import Annotated, Optional, Any, Union
import os

from pydantic import BaseModel, Field


MAX_INPUT_LENGTH = int(os.getenv("GENFST_MAX_INPUT_LENGTH", "4096"))


# =============================================================================
# Enums
# =============================================================================

class ParseStatus(str, Enum):
    """Outcome of parsing one input."""
    SUCCESS = "success"
    AMBIGUOUS = "ambiguous"
    FAILURE = "failure"


class ErrorCode(str, Enum):
    """Structured error codes."""
    TRANSDUCER_NOT_FOUND = "TRANSDUCER_NOT_FOUND"
    INVALID_RULE = "INVALID_RULE"
    VALIDATION_ERROR = "VALIDATION_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

RuleItemSchema = Union[str, tuple[str, str]]


class StatsInfo(BaseModel):
    """Size of a transducer graph."""
    vertex_count: int = 0
    edge_count: int = 0
    terminal_vertices: int = 0

    model_config = {"from_attributes": True}


class ParseResultInfo(BaseModel):
    """Result of parsing one input."""
    input: str
    status: ParseStatus
    accepted: bool
    output: Optional[str] = Field(None, description="Set only on success")
    outputs: list[str] = Field(
        default_factory=list,
        description="Every candidate output, in discovery order",
    )
    error: Optional[str] = Field(None, description="Failure reason")


# =============================================================================
# Requests
# =============================================================================

class CreateTransducerRequest(BaseModel):
    """Build a transducer from rules."""
    rules: list[list[RuleItemSchema]] = Field(
        ...,
        description="Rules in registration order",
        examples=[[["play", ["s", "^s"]], ["act", ["ing", ""]]]],
    )
    name: Optional[str] = Field(None, max_length=200)


class ParseRequest(BaseModel):
    """Parse one input."""
    input: str = Field(..., max_length=MAX_INPUT_LENGTH)


class BatchParseRequest(BaseModel):
    """Parse several inputs independently."""
    inputs: list[Annotated[str, Field(max_length=MAX_INPUT_LENGTH)]] = Field(
        ..., max_length=1000
    )


# =============================================================================
# Responses
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class TransducerResponse(BaseModel):
    """A registered transducer."""
    transducer_id: str
    name: Optional[str] = None
    rule_count: int
    created_at: float
    parse_count: int = 0
    stats: StatsInfo
    warnings: list[str] = Field(default_factory=list)


class TransducerListResponse(BaseModel):
    """List of transducer IDs."""
    transducers: list[str]
    count: int


class ParseResponse(BaseModel):
    """Response from parsing one input."""
    transducer_id: str
    result: ParseResultInfo


class BatchParseResponse(BaseModel):
    """Response from parsing several inputs."""
    transducer_id: str
    results: list[ParseResultInfo]
    accepted_count: int


class DeleteTransducerResponse(BaseModel):
    """Response from deleting a transducer."""
    success: bool
    transducer_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
    environment: str
