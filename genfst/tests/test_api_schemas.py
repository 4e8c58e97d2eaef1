"""
Tests for API Pydantic schemas.

Validates that:
- Rule items accept strings and [source, destination] pairs
- Request limits are enforced
- Responses serialize enums as values
"""

import pytest
from pydantic import ValidationError

from genfst.api.schemas import (
    CreateTransducerRequest,
    ParseRequest,
    BatchParseRequest,
    ParseResultInfo,
    ParseStatus,
    ErrorResponse,
    ErrorCode,
    MAX_INPUT_LENGTH,
)


class TestPydanticSchemas:
    """Tests for Pydantic schema validation."""

    def test_rule_items(self):
        """Strings stay literals, pairs become tuples."""
        request = CreateTransducerRequest(rules=[["act", ["ing", ""]]])
        assert request.rules == [["act", ("ing", "")]]

    def test_rule_item_wrong_arity(self):
        with pytest.raises(ValidationError):
            CreateTransducerRequest(rules=[["act", ["a", "b", "c"]]])

    def test_rule_item_wrong_type(self):
        with pytest.raises(ValidationError):
            CreateTransducerRequest(rules=[["act", 5]])

    def test_input_length_limit(self):
        with pytest.raises(ValidationError):
            ParseRequest(input="a" * (MAX_INPUT_LENGTH + 1))

    def test_parse_result_serialization(self):
        info = ParseResultInfo(
            input="acting",
            status=ParseStatus.AMBIGUOUS,
            accepted=True,
            outputs=["act", "acte"],
        )

        data = info.model_dump(mode="json")
        assert data["status"] == "ambiguous"
        assert data["output"] is None
        assert data["outputs"] == ["act", "acte"]

    def test_error_response(self):
        error = ErrorResponse(
            error="Transducer x not found",
            error_code=ErrorCode.TRANSDUCER_NOT_FOUND,
        )

        data = error.model_dump(mode="json")
        assert data["error_code"] == "TRANSDUCER_NOT_FOUND"
        assert data["api_version"] == "v1"

    def test_batch_items_capped_like_single_input(self):
        """Each batch input obeys the single-input length limit."""
        BatchParseRequest(inputs=["a" * MAX_INPUT_LENGTH, "b"])
        with pytest.raises(ValidationError):
            BatchParseRequest(inputs=["ok", "a" * (MAX_INPUT_LENGTH + 1)])
