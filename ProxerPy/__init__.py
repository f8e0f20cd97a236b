"""
ProxerPy - Async client for the Proxer web API
"""

__version__ = "0.1.0"

from ProxerPy.clients import (
    ProxerClient,
    ProxerOptions,
    ProxerRequest,
    ProxerResponse,
    TEST_MODE,
    make_request,
)

__all__ = [
    "__version__",
    "ProxerClient",
    "ProxerOptions",
    "ProxerRequest",
    "ProxerResponse",
    "TEST_MODE",
    "make_request"
]
