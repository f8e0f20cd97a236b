"""
Endpoints of the "user" API class
"""

from typing import Optional

from ProxerPy.clients.base_transport import HTTPMethod
from ProxerPy.clients.request import ProxerRequest
from .request_factory import build_request


def login(username: str, password: str, secretkey: Optional[str] = None) -> ProxerRequest:
    """
    Log a user in. The login token is returned in data["token"].

    Args:
        username: Account name
        password: Account password
        secretkey: Two factor key, only if enabled for the account
    """
    return build_request(
        "user",
        "login",
        method=HTTPMethod.POST,
        post_args={"username": username, "password": password, "secretkey": secretkey},
    )


def logout() -> ProxerRequest:
    return build_request("user", "logout", authorization=True)


def userinfo(uid: Optional[int] = None, username: Optional[str] = None) -> ProxerRequest:
    """Profile of a user; without uid or username the logged in user is used"""
    return build_request(
        "user",
        "userinfo",
        get_args={"uid": uid, "username": username},
        authorization=True,
    )
