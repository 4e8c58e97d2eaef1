"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine calls
2. Manages transducer sessions
3. Formats results for clients

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .schemas import (
    # Requests
    CreateTransducerRequest,
    ParseRequest,
    BatchParseRequest,
    # Responses
    TransducerResponse,
    ParseResponse,
    BatchParseResponse,
    ErrorResponse,
    # Shared
    StatsInfo,
    ParseResultInfo,
    # Enums
    ParseStatus,
    ErrorCode,
)
from ..engine_core import ParseResult
from ..rule_spec import validate_rules
from ..session import SessionManager, TransducerSession


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        # Build a transducer
        response = service.create_transducer(request)

        # Parse with it
        parsed = service.parse(response.transducer_id, ParseRequest(input="acts"))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_transducer(
        self, request: CreateTransducerRequest
    ) -> TransducerResponse | ErrorResponse:
        """
        Validate rules and build a transducer from them.

        Returns an INVALID_RULE error without registering anything if any
        rule is malformed.
        """
        rules = [[self._to_raw_item(item) for item in r] for r in request.rules]

        validation = validate_rules(rules)
        if not validation.valid:
            return ErrorResponse(
                error="Invalid rules",
                error_code=ErrorCode.INVALID_RULE,
                details={"errors": validation.errors},
            )

        session = self.session_manager.create_session(rules, name=request.name)
        return self._session_to_response(session, warnings=validation.warnings)

    def get_transducer(self, transducer_id: str) -> TransducerResponse | ErrorResponse:
        """Get transducer info."""
        session = self.session_manager.get_session(transducer_id)
        if not session:
            return self._not_found(transducer_id)
        return self._session_to_response(session)

    def parse(
        self, transducer_id: str, request: ParseRequest
    ) -> ParseResponse | ErrorResponse:
        """Parse one input."""
        session = self.session_manager.get_session(transducer_id)
        if not session:
            return self._not_found(transducer_id)

        result = session.parse(request.input)
        return ParseResponse(
            transducer_id=transducer_id,
            result=self._result_to_info(request.input, result),
        )

    def parse_batch(
        self, transducer_id: str, request: BatchParseRequest
    ) -> BatchParseResponse | ErrorResponse:
        """Parse several inputs, one independent call each."""
        session = self.session_manager.get_session(transducer_id)
        if not session:
            return self._not_found(transducer_id)

        results = [
            self._result_to_info(text, result)
            for text, result in zip(request.inputs, session.parse_batch(request.inputs))
        ]
        return BatchParseResponse(
            transducer_id=transducer_id,
            results=results,
            accepted_count=sum(1 for r in results if r.accepted),
        )

    def get_stats(self, transducer_id: str) -> StatsInfo | ErrorResponse:
        """Get graph statistics."""
        session = self.session_manager.get_session(transducer_id)
        if not session:
            return self._not_found(transducer_id)
        return StatsInfo(**session.stats().to_dict())

    def delete_transducer(self, transducer_id: str) -> bool:
        """Drop a transducer."""
        return self.session_manager.end_session(transducer_id)

    def list_transducers(self) -> list[str]:
        """List active transducer IDs."""
        return self.session_manager.list_active_sessions()

    # =========================================================================
    # Helpers
    # =========================================================================

    def _to_raw_item(self, item):
        if isinstance(item, str):
            return item
        return tuple(item)

    def _not_found(self, transducer_id: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Transducer {transducer_id} not found",
            error_code=ErrorCode.TRANSDUCER_NOT_FOUND,
        )

    def _session_to_response(
        self,
        session: TransducerSession,
        warnings: list[str] | None = None,
    ) -> TransducerResponse:
        return TransducerResponse(
            transducer_id=session.session_id,
            name=session.name,
            rule_count=len(session.rules),
            created_at=session.created_at,
            parse_count=session.parse_count,
            stats=StatsInfo(**session.stats().to_dict()),
            warnings=warnings or [],
        )

    def _result_to_info(self, text: str, result: ParseResult) -> ParseResultInfo:
        return ParseResultInfo(
            input=text,
            status=ParseStatus(result.kind.value),
            accepted=result.accepted,
            output=result.output,
            outputs=result.outputs,
            error=result.error,
        )
