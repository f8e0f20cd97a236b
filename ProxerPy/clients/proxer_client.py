"""
Proxer API Client

Pairs an API key (or the test mode sentinel) and an optional login token with
connection options, and dispatches ProxerRequest descriptors through a
transport adapter.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional
import logging

from ProxerPy.api import user as user_api
from ProxerPy.utils.env_settings import load_settings

from .base_transport import BaseTransport, HTTPMethod, RawResponse
from .exceptions import (
    AuthenticationError,
    ErrorKind,
    InvalidParametersError,
    ProxerError,
    UnexpectedResponseError,
    UnknownError,
)
from .httpx_transport import HttpxTransport
from .options import ApiKeyType, ProxerOptions, TEST_MODE
from .request import ProxerRequest
from .request_builder import build_headers, build_url, mask_secret
from .response import ProxerResponse, normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProxerClient:
    """
    Authentication state for talking to the Proxer API

    Create instances with ProxerClient.create(); the client is immutable, so
    login and logout return new clients.
    """
    key: ApiKeyType
    options: ProxerOptions = field(default_factory=ProxerOptions)
    login_token: Optional[str] = None
    transport: BaseTransport = field(default_factory=HttpxTransport, compare=False, repr=False)

    def __repr__(self) -> str:
        key = "TEST_MODE" if self.key is TEST_MODE else mask_secret(self.key)
        token = mask_secret(self.login_token) if self.login_token is not None else None
        return f"ProxerClient(key={key}, options={self.options!r}, login_token={token})"

    @classmethod
    def create(cls,
               key: ApiKeyType,
               options: Optional[ProxerOptions] = None,
               transport: Optional[BaseTransport] = None) -> "ProxerClient":
        """
        Create a new client

        Args:
            key: API key, or TEST_MODE to use the API test mode
            options: Connection options (default: https://proxer.me/api)
            transport: Transport adapter (default: HttpxTransport)

        Returns:
            ProxerClient without login token

        Raises:
            InvalidParametersError: If key is neither TEST_MODE nor a non-empty string
        """
        if options is None:
            options = ProxerOptions()
        if not isinstance(options, ProxerOptions):
            raise InvalidParametersError("options must be ProxerOptions")
        if transport is not None and not isinstance(transport, BaseTransport):
            raise InvalidParametersError("transport must be a BaseTransport")

        if key is not TEST_MODE and not (isinstance(key, str) and key):
            raise InvalidParametersError(
                "key must be a non-empty string or TEST_MODE",
                details={"key_type": type(key).__name__}
            )

        if transport is None:
            return cls(key=key, options=options)
        return cls(key=key, options=options, transport=transport)

    @classmethod
    def from_env(cls,
                 env_file: Optional[str] = None,
                 environ: Optional[Mapping[str, str]] = None,
                 transport: Optional[BaseTransport] = None) -> "ProxerClient":
        """Create a client from PROXER_* environment variables"""
        settings = load_settings(env_file=env_file, environ=environ)
        if transport is None:
            transport = HttpxTransport(timeout=settings.timeout)
        return cls.create(settings.get_api_key(), settings.to_options(), transport=transport)

    @property
    def is_test_mode(self) -> bool:
        return self.key is TEST_MODE

    @property
    def is_logged_in(self) -> bool:
        return self.login_token is not None

    def with_login_token(self, login_token: Optional[str]) -> "ProxerClient":
        """Return a copy of this client carrying login_token (None drops it)"""
        if login_token is not None and not (isinstance(login_token, str) and login_token):
            raise InvalidParametersError("login token must be a non-empty string")
        return replace(self, login_token=login_token)

    async def make_request(self, request: ProxerRequest) -> ProxerResponse:
        """Dispatch request through this client, see make_request()"""
        return await make_request(request, self)

    async def login(self, username: str, password: str, secretkey: Optional[str] = None) -> "ProxerClient":
        """
        Log in and return a client carrying the login token

        Raises:
            AuthenticationError: If the API rejected the login or sent no token
        """
        response = await self.make_request(user_api.login(username, password, secretkey))

        data = response.data if isinstance(response.data, Mapping) else {}
        token = data.get("token")
        if response.error or not isinstance(token, str) or not token:
            logger.warning(f"Login failed for user {username}: {response.message}")
            raise AuthenticationError(
                f"Login failed: {response.message or 'no login token returned'}",
                response=response,
                details={"code": response.code}
            )

        logger.info(f"Logged in user {username}")
        return self.with_login_token(token)

    async def logout(self) -> "ProxerClient":
        """Log out on the API side and return a client without login token"""
        if self.login_token is None:
            return self

        response = await self.make_request(user_api.logout())
        if response.error:
            logger.warning(f"Logout was rejected by the API: {response.message}")
        return self.with_login_token(None)

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()


def _validate(request: Any, client: Any) -> None:
    if not isinstance(request, ProxerRequest):
        raise InvalidParametersError("request must be a ProxerRequest")
    if not isinstance(client, ProxerClient) or not isinstance(client.options, ProxerOptions):
        raise InvalidParametersError("client must be a ProxerClient with ProxerOptions")


async def _dispatch(request: ProxerRequest, url: str, headers: Mapping[str, str], client: ProxerClient) -> RawResponse:
    if not isinstance(request.get_args, Mapping) or not isinstance(request.post_args, Mapping):
        raise InvalidParametersError("request arguments must be mappings")

    logger.debug(f"Dispatching {request.method} {url}")
    if request.method is HTTPMethod.GET:
        return await client.transport.get(url, headers, request.get_args)
    if request.method is HTTPMethod.POST:
        return await client.transport.post(url, request.post_args, headers, request.get_args)

    raise InvalidParametersError(f"Unsupported method: {request.method!r}")


async def make_request(request: ProxerRequest, client: ProxerClient) -> ProxerResponse:
    """
    Make a request to the API through the given client

    Args:
        request: Request descriptor
        client: Client providing options and credentials

    Returns:
        ProxerResponse for a 200 answer with a JSON object body. Note that
        response.error may still be True if the API reported an error.

    Raises:
        InvalidParametersError: If request or client are not the expected types
        UnexpectedResponseError: For any other status or a non-object body
        TransportFailureError: If the transport could not complete the call
        UnknownError: If building or dispatching rejected the request internally
    """
    _validate(request, client)

    try:
        url = build_url(request, client.options)
        headers = build_headers(request, client)
        raw = await _dispatch(request, url, headers, client)
    except ProxerError as e:
        # Arguments passed _validate, so a parameter error from here on is internal
        if e.kind is ErrorKind.INVALID_PARAMETERS:
            logger.error(f"Request construction failed for {request.endpoint}: {e.message}")
            raise UnknownError(details={"reason": e.message}) from e
        raise

    if raw.status_code != 200 or not raw.is_json_object:
        logger.warning(f"Unexpected response from {request.endpoint}: {raw.status_code}")
        raise UnexpectedResponseError(raw)

    return normalize(raw.body)
