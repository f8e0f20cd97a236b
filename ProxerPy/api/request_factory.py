"""
Helpers shared by the endpoint catalog modules
"""

from typing import Any, Dict, Mapping, Optional

from ProxerPy.clients.base_transport import HTTPMethod
from ProxerPy.clients.request import ProxerRequest


def stringify_args(args: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """
    Convert argument values to the strings sent on the wire

    None values are dropped so optional endpoint parameters can be passed
    through unconditionally. Booleans become "true"/"false".
    """
    result: Dict[str, str] = {}
    for name, value in (args or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            result[name] = "true" if value else "false"
        else:
            result[name] = str(value)
    return result


def build_request(api_class: str,
                  api_func: str,
                  method: HTTPMethod = HTTPMethod.GET,
                  get_args: Optional[Mapping[str, Any]] = None,
                  post_args: Optional[Mapping[str, Any]] = None,
                  extra_header: Optional[Mapping[str, str]] = None,
                  authorization: bool = False) -> ProxerRequest:
    return ProxerRequest(
        api_class=api_class,
        api_func=api_func,
        method=method,
        get_args=stringify_args(get_args),
        post_args=stringify_args(post_args),
        extra_header=dict(extra_header or {}),
        authorization=authorization,
    )
