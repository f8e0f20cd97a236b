"""
Endpoints of the "info" API class (anime and manga entries)
"""

from typing import Optional

from ProxerPy.clients.request import ProxerRequest
from .request_factory import build_request


def entry(entry_id: int) -> ProxerRequest:
    """Core data of an entry"""
    return build_request("info", "entry", get_args={"id": entry_id})


def comments(entry_id: int,
             page: Optional[int] = None,
             limit: Optional[int] = None,
             sort: Optional[str] = None) -> ProxerRequest:
    """
    Comments of an entry

    Args:
        entry_id: Entry id
        page: Page to load, starting at 0
        limit: Comments per page
        sort: "rating" or "newest"
    """
    return build_request(
        "info",
        "comments",
        get_args={"id": entry_id, "p": page, "limit": limit, "sort": sort},
    )
