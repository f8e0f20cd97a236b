"""
httpx Transport Implementation

Default transport adapter backed by httpx.AsyncClient. Connection pooling, TLS
and timeouts are left to httpx; this adapter only translates between the
client's argument maps and httpx, and maps httpx failures onto
TransportFailureError.
"""

from typing import Dict, Any, Optional, Mapping
import httpx
import logging

from .base_transport import BaseTransport, RawResponse
from .exceptions import TransportFailureError

logger = logging.getLogger(__name__)


class HttpxTransport(BaseTransport):
    """
    Transport adapter using httpx
    """

    def __init__(self,
                 timeout: float = 30,
                 verify_ssl: bool = True,
                 persistent: bool = False,
                 client: Optional[httpx.AsyncClient] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the httpx transport

        Args:
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify SSL certificates
            persistent: Keep one AsyncClient open across requests (closed by aclose)
            client: Caller-owned AsyncClient to use for every request
            transport: Low-level httpx transport, e.g. httpx.MockTransport in tests
        """
        super().__init__()
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.persistent = persistent

        self.client_config: Dict[str, Any] = {
            "timeout": httpx.Timeout(timeout),
            "verify": verify_ssl,
            "follow_redirects": False
        }
        if transport is not None:
            self.client_config["transport"] = transport

        self._client = client
        self._owned_client: Optional[httpx.AsyncClient] = None

    async def get(self, url: str, headers: Mapping[str, str], query: Mapping[str, str]) -> RawResponse:
        return await self._send("GET", url, headers, query)

    async def post(self,
                   url: str,
                   body: Mapping[str, str],
                   headers: Mapping[str, str],
                   query: Mapping[str, str]) -> RawResponse:
        return await self._send("POST", url, headers, query, dict(body))

    async def _send(self,
                    method: str,
                    url: str,
                    headers: Mapping[str, str],
                    query: Mapping[str, str],
                    data: Optional[Dict[str, str]] = None) -> RawResponse:
        self.logger.debug(f"Making {method} request to {url}")

        try:
            client = self._shared_client()
            if client is not None:
                response = await client.request(
                    method=method,
                    url=url,
                    params=dict(query),
                    data=data,
                    headers=dict(headers)
                )
            else:
                async with httpx.AsyncClient(**self.client_config) as client:
                    response = await client.request(
                        method=method,
                        url=url,
                        params=dict(query),
                        data=data,
                        headers=dict(headers)
                    )

        except httpx.TimeoutException as e:
            self.logger.warning(f"Request timeout for {method} {url}: {e}")
            raise TransportFailureError(e, f"Request timeout after {self.timeout} seconds") from e

        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.logger.warning(f"Network error for {method} {url}: {e}")
            raise TransportFailureError(e, f"Network error: {e}") from e

        return self._process_response(response)

    def _shared_client(self) -> Optional[httpx.AsyncClient]:
        if self._client is not None:
            return self._client
        if self.persistent:
            if self._owned_client is None or self._owned_client.is_closed:
                self._owned_client = httpx.AsyncClient(**self.client_config)
            return self._owned_client
        return None

    def _process_response(self, response: httpx.Response) -> RawResponse:
        """
        Decode the response body as JSON where possible
        """
        try:
            body = response.json()
        except ValueError:
            body = response.text

        self.logger.debug(f"Received response: {response.status_code}")

        return RawResponse(
            status_code=response.status_code,
            body=body,
            headers=dict(response.headers),
            raw_content=response.text
        )

    async def aclose(self) -> None:
        """Close the AsyncClient this transport opened, never a caller-owned one"""
        if self._owned_client is not None:
            await self._owned_client.aclose()
            self._owned_client = None
