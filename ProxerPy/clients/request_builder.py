"""
Request Builder

Pure functions turning a ProxerRequest plus client state into the final URL and
header set. Both raise InvalidParametersError on structurally malformed input.
"""

from typing import Any, Dict, Mapping, MutableMapping
from urllib.parse import urlunsplit
import logging

from .exceptions import InvalidParametersError
from .options import ProxerOptions, TEST_MODE
from .request import ProxerRequest

logger = logging.getLogger(__name__)

API_VERSION = "v1"

USER_AGENT_HEADER = "User-Agent"
API_KEY_HEADER = "proxer-api-key"
TEST_MODE_HEADER = "proxer-api-testmode"
LOGIN_TOKEN_HEADER = "proxer-api-token"


def mask_secret(value: Any) -> str:
    """Shorten a key or token for log output"""
    if not isinstance(value, str):
        return repr(value)
    if len(value) <= 4:
        return "****"
    return f"{value[:2]}****{value[-2:]}"


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def _is_string_mapping(value: Any) -> bool:
    return isinstance(value, Mapping) and all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    )


def build_url(request: ProxerRequest, options: ProxerOptions) -> str:
    """
    Build the fully qualified URL of an API call

    Format: {scheme}://{host}[:{port}]{path}/v1/{api_class}/{api_func}

    Args:
        request: Request descriptor
        options: Connection options of the client

    Returns:
        URL string

    Raises:
        InvalidParametersError: If request or options are malformed
    """
    if not isinstance(request, ProxerRequest) or not isinstance(options, ProxerOptions):
        raise InvalidParametersError("build_url expects a ProxerRequest and ProxerOptions")

    if not _is_non_empty_str(request.api_class) or not _is_non_empty_str(request.api_func):
        raise InvalidParametersError(
            "api_class and api_func must be non-empty strings",
            details={"api_class": request.api_class, "api_func": request.api_func}
        )

    if not _is_non_empty_str(options.host) or not isinstance(options.path, str):
        raise InvalidParametersError("host must be a non-empty string and path a string")

    port = options.port
    if port is not None and (isinstance(port, bool) or not isinstance(port, int)):
        raise InvalidParametersError("port must be an integer", details={"port": port})

    netloc = options.host if port is None else f"{options.host}:{port}"
    path = f"{options.path}/{API_VERSION}/{request.api_class}/{request.api_func}"

    return urlunsplit((options.scheme, netloc, path, "", ""))


def _put_new(headers: MutableMapping[str, str], name: str, value: str) -> None:
    # Header names are case-insensitive; a caller-supplied header always wins
    if name.lower() not in (existing.lower() for existing in headers):
        headers[name] = value


def build_headers(request: ProxerRequest, client: Any) -> Dict[str, str]:
    """
    Build the final header set of an API call

    Starting from the request's extra headers, adds the device header, then
    either the test mode marker or the API key, then the login token when the
    request needs authorization and the client has one. No header already
    present is overwritten.

    Args:
        request: Request descriptor
        client: ProxerClient (or anything with key, login_token and options)

    Returns:
        Ordered header dictionary

    Raises:
        InvalidParametersError: If request or client are malformed
    """
    if not isinstance(request, ProxerRequest) or not _is_string_mapping(request.extra_header):
        raise InvalidParametersError("build_headers expects a ProxerRequest with string headers")

    key = getattr(client, "key", None)
    login_token = getattr(client, "login_token", None)
    options = getattr(client, "options", None)

    if key is not TEST_MODE and not _is_non_empty_str(key):
        raise InvalidParametersError("client key must be a non-empty string or TEST_MODE")
    if login_token is not None and not isinstance(login_token, str):
        raise InvalidParametersError("login token must be a string")
    if not isinstance(options, ProxerOptions) or not isinstance(options.device, str):
        raise InvalidParametersError("client options must be ProxerOptions with a device string")

    headers: Dict[str, str] = dict(request.extra_header)

    _put_new(headers, USER_AGENT_HEADER, options.device)

    if key is TEST_MODE:
        _put_new(headers, TEST_MODE_HEADER, "1")
    else:
        _put_new(headers, API_KEY_HEADER, key)

    # Without a login token the header is left out and the API decides
    if request.authorization and login_token is not None:
        _put_new(headers, LOGIN_TOKEN_HEADER, login_token)

    for name, value in headers.items():
        if not (name.isascii() and value.isascii()):
            raise InvalidParametersError("header names and values must be ASCII", details={"header": name})

    logger.debug(f"Built headers for {request.endpoint}: {list(headers)}")
    return headers
