# Author: Bradley R. Kinnard - trust but validate

"""Unit tests for the wire models."""

import pytest
from pydantic import ValidationError

from src.code_feedback.core.models import CodeRequest, CodeResponse


def test_missing_code_defaults_to_empty():
    assert CodeRequest.model_validate_json(b"{}").code == ""


def test_unknown_fields_ignored():
    req = CodeRequest.model_validate_json(b'{"code": "x", "language": "go"}')
    assert req.code == "x"


@pytest.mark.parametrize("raw", [b"", b"not json", b'{"code":', b'{"code": 5}', b"[]", b'"code"'])
def test_bad_bodies_rejected(raw):
    with pytest.raises(ValidationError):
        CodeRequest.model_validate_json(raw)


def test_response_serializes_compact():
    assert CodeResponse(feedback="hi").model_dump_json() == '{"feedback":"hi"}'


def test_models_frozen():
    req = CodeRequest(code="a")
    with pytest.raises(ValidationError):
        req.code = "b"


def test_null_body_is_empty_request():
    """null decodes like {}, not a 400"""
    assert CodeRequest.model_validate_json(b"null").code == ""
