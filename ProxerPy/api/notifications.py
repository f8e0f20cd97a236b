"""
Endpoints of the "notifications" API class
"""

from typing import Optional

from ProxerPy.clients.request import ProxerRequest
from .request_factory import build_request


def news(page: Optional[int] = None, limit: Optional[int] = None) -> ProxerRequest:
    return build_request("notifications", "news", get_args={"p": page, "limit": limit})
