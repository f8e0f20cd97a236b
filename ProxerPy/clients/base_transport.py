"""
Base Transport Interface

Abstract base class defining the contract between the Proxer client and the
HTTP engine that actually performs requests. The client never talks to a
socket itself; it hands a finished URL, header set and argument maps to a
transport and receives a RawResponse back.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, Union, Mapping, List
from dataclasses import dataclass
from enum import Enum
import time
import logging

from .exceptions import TransportFailureError

logger = logging.getLogger(__name__)


class HTTPMethod(Enum):
    """HTTP methods used by the Proxer API"""
    GET = "GET"
    POST = "POST"


@dataclass
class RawResponse:
    """Undecoded outcome of a transport call"""
    status_code: int
    body: Any = None
    headers: Optional[Dict[str, str]] = None
    raw_content: Optional[Union[str, bytes]] = None

    @property
    def is_json_object(self) -> bool:
        return isinstance(self.body, Mapping)


class BaseTransport(ABC):
    """
    Abstract base class for transport adapters.

    Implementations must raise TransportFailureError for network and protocol
    level failures and return a RawResponse for every HTTP answer, whatever
    its status code.
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    async def get(self,
                  url: str,
                  headers: Mapping[str, str],
                  query: Mapping[str, str]) -> RawResponse:
        """
        Perform a GET request

        Args:
            url: Fully qualified request URL
            headers: Final header set
            query: Query arguments

        Returns:
            RawResponse for any HTTP answer

        Raises:
            TransportFailureError: If no HTTP answer was received
        """
        pass

    @abstractmethod
    async def post(self,
                   url: str,
                   body: Mapping[str, str],
                   headers: Mapping[str, str],
                   query: Mapping[str, str]) -> RawResponse:
        """
        Perform a POST request with a form-encoded body

        Args:
            url: Fully qualified request URL
            body: Form arguments
            headers: Final header set
            query: Query arguments

        Returns:
            RawResponse for any HTTP answer

        Raises:
            TransportFailureError: If no HTTP answer was received
        """
        pass

    async def request(self,
                      method: HTTPMethod,
                      url: str,
                      headers: Mapping[str, str],
                      query: Mapping[str, str],
                      body: Optional[Mapping[str, str]] = None) -> RawResponse:
        """Dispatch to get() or post() based on method"""
        if method is HTTPMethod.GET:
            return await self.get(url, headers, query)
        return await self.post(url, body or {}, headers, query)

    async def aclose(self) -> None:
        """Release resources held by the transport"""
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()


class StubTransport(BaseTransport):
    """
    Canned-response transport for tests and offline use

    Responses are looked up by URL substring; "*" matches everything. A value
    that is an exception is raised as a transport failure instead of returned.
    """

    def __init__(self, responses: Dict[str, Union[RawResponse, BaseException]]):
        super().__init__()
        self.responses = responses
        self.request_history: List[Dict[str, Any]] = []

    async def get(self, url, headers, query):
        return self._respond(HTTPMethod.GET, url, headers, query, None)

    async def post(self, url, body, headers, query):
        return self._respond(HTTPMethod.POST, url, headers, query, body)

    def _respond(self, method, url, headers, query, body) -> RawResponse:
        self.request_history.append({
            "method": method,
            "url": url,
            "headers": dict(headers),
            "query": dict(query),
            "body": dict(body) if body is not None else None,
            "timestamp": time.time()
        })

        for pattern, outcome in self.responses.items():
            if pattern == "*" or pattern in url:
                if isinstance(outcome, TransportFailureError):
                    raise outcome
                if isinstance(outcome, BaseException):
                    raise TransportFailureError(outcome)
                return outcome

        return RawResponse(status_code=404, body={"error": 1, "message": "Stub endpoint not found"})
