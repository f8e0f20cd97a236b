"""
API Client Layer for ProxerPy

Request descriptors, client state, request construction, transport adapters
and response normalization.
"""

from .base_transport import BaseTransport, HTTPMethod, RawResponse, StubTransport
from .httpx_transport import HttpxTransport
from .options import ApiKey, ProxerOptions, TEST_MODE
from .request import ProxerRequest
from .request_builder import build_headers, build_url
from .response import ProxerResponse, normalize
from .proxer_client import ProxerClient, make_request
from .exceptions import (
    ErrorKind,
    ProxerError,
    InvalidParametersError,
    UnexpectedResponseError,
    TransportFailureError,
    AuthenticationError,
    UnknownError
)

__all__ = [
    "BaseTransport",
    "HTTPMethod",
    "RawResponse",
    "StubTransport",
    "HttpxTransport",
    "ApiKey",
    "ProxerOptions",
    "TEST_MODE",
    "ProxerRequest",
    "build_headers",
    "build_url",
    "ProxerResponse",
    "normalize",
    "ProxerClient",
    "make_request",
    "ErrorKind",
    "ProxerError",
    "InvalidParametersError",
    "UnexpectedResponseError",
    "TransportFailureError",
    "AuthenticationError",
    "UnknownError"
]
