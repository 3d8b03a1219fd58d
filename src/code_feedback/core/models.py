# Author: Bradley R. Kinnard - where types go to be validated

"""
Wire models for POST /code. Both live for exactly one request.
Missing `code` means empty string, not a 400. Unknown fields are dropped.
A bare JSON null decodes to an empty request, same as {}.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class CodeRequest(BaseModel):
    """What the client sends. No content validation, empty code is fine."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    code: str = ""

    @model_validator(mode="before")
    @classmethod
    def _null_is_empty(cls, data: Any) -> Any:
        return {} if data is None else data


class CodeResponse(BaseModel):
    """What the client gets back."""
    model_config = ConfigDict(frozen=True)

    feedback: str
