"""
Request descriptor

A ProxerRequest describes one API call independently of any client. The
endpoint catalog in ProxerPy.api builds these; the client combines them with
its options and credentials at call time.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .base_transport import HTTPMethod


def _freeze(value):
    # Non-mapping values are left alone so validation can reject them later
    if isinstance(value, Mapping):
        return MappingProxyType(dict(value))
    return value


@dataclass(frozen=True)
class ProxerRequest:
    """Immutable description of a single API call"""
    api_class: str
    api_func: str
    method: HTTPMethod = HTTPMethod.GET
    get_args: Mapping[str, str] = field(default_factory=dict)
    post_args: Mapping[str, str] = field(default_factory=dict)
    extra_header: Mapping[str, str] = field(default_factory=dict)
    authorization: bool = False

    def __post_init__(self):
        object.__setattr__(self, "get_args", _freeze(self.get_args))
        object.__setattr__(self, "post_args", _freeze(self.post_args))
        object.__setattr__(self, "extra_header", _freeze(self.extra_header))

    @property
    def endpoint(self) -> str:
        return f"{self.api_class}/{self.api_func}"
