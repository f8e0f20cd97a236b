"""
Endpoint catalog

Each module mirrors one API class and exposes functions returning
ProxerRequest descriptors for it.
"""

from . import info, lists, notifications, ucp, user
from .request_factory import build_request, stringify_args

__all__ = [
    "info",
    "lists",
    "notifications",
    "ucp",
    "user",
    "build_request",
    "stringify_args"
]
