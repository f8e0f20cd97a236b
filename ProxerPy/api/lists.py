"""
Endpoints of the "list" API class
"""

from typing import Optional

from ProxerPy.clients.request import ProxerRequest
from .request_factory import build_request


def characters(start: Optional[str] = None,
               contains: Optional[str] = None,
               search: Optional[str] = None,
               subject: Optional[str] = None,
               page: Optional[int] = None,
               limit: Optional[int] = None) -> ProxerRequest:
    return build_request(
        "list",
        "characters",
        get_args={
            "start": start,
            "contains": contains,
            "search": search,
            "subject": subject,
            "p": page,
            "limit": limit,
        },
    )
