"""
Response normalization

Turns the decoded JSON object of a successful API call into a ProxerResponse.
The upstream numeric "error" code becomes a boolean flag; every other field is
passed through untouched.
"""

from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field

ERROR_FIELD = "error"

# A body without an error code is treated as an error
MISSING_ERROR_CODE = 1


class ProxerResponse(BaseModel):
    """Normalized API answer. Unknown upstream fields are kept as extra fields."""

    model_config = ConfigDict(extra="allow")

    error: bool = Field(True, description="True if the API reported a non-zero error code")
    message: Any = Field(None, description="Human readable message sent by the API")
    code: Any = Field(None, description="Detailed API error code, only present on errors")
    data: Any = Field(None, description="Payload of the call")

    @property
    def extra_fields(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


def canonical_key(key: Any) -> str:
    return key if isinstance(key, str) else str(key)


def normalize(body: Mapping[Any, Any]) -> ProxerResponse:
    """
    Normalize a decoded response body

    Args:
        body: JSON object returned by the API

    Returns:
        ProxerResponse with error mapped to a boolean
    """
    payload = {canonical_key(key): value for key, value in body.items()}
    payload[ERROR_FIELD] = payload.get(ERROR_FIELD, MISSING_ERROR_CODE) != 0
    return ProxerResponse.model_validate(payload)
