"""
Endpoints of the "ucp" (user control panel) API class
"""

from typing import Optional

from ProxerPy.clients.request import ProxerRequest
from .request_factory import build_request


def list_entries(kat: Optional[str] = None,
                 page: Optional[int] = None,
                 limit: Optional[int] = None,
                 search: Optional[str] = None,
                 sort: Optional[str] = None) -> ProxerRequest:
    """
    Anime or manga list of the logged in user

    Args:
        kat: "anime" or "manga"
        page: Page to load, starting at 0
        limit: Entries per page
        search: Only entries whose name contains this text
        sort: Sort order as accepted by the API
    """
    return build_request(
        "ucp",
        "list",
        get_args={"kat": kat, "p": page, "limit": limit, "search": search, "sort": sort},
        authorization=True,
    )
