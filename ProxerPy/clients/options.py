"""
Client connection options and the API key sentinel
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from ProxerPy import __version__

DEFAULT_HOST = "proxer.me"
DEFAULT_PATH = "/api"


class ApiKey(Enum):
    """Non-credential API key forms"""
    TEST = "test"


# Requests made with this key are flagged as test traffic instead of carrying a key
TEST_MODE = ApiKey.TEST

ApiKeyType = Union[str, ApiKey]


def default_device() -> str:
    return f"ProxerPy/{__version__}"


@dataclass(frozen=True)
class ProxerOptions:
    """Immutable connection settings shared by every request of a client"""
    host: str = DEFAULT_HOST
    path: str = DEFAULT_PATH
    port: Optional[int] = None
    use_ssl: bool = True
    device: str = field(default_factory=default_device)

    @property
    def scheme(self) -> str:
        return "https" if self.use_ssl else "http"
