"""
HTTP client bound to the inventory backend.

Every request goes through one ``requests.Session`` (cookies are kept between
calls) and picks up the current bearer token at send time, so a token written
to storage after the client was built is used by the next call.
"""

import logging
from typing import Any, Optional

import requests

from estoque.api.errors import ApiError, error_from_response
from estoque.config import settings
from estoque.token_store import TokenProvider

logger = logging.getLogger(__name__)


class BearerTokenAuth(requests.auth.AuthBase):
    def __init__(self, token_provider: TokenProvider):
        self.token_provider = token_provider

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        token = self.token_provider.get()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        return request


class ApiClient:
    def __init__(
        self,
        base_url: str,
        token_provider: TokenProvider,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.auth = BearerTokenAuth(token_provider)
        self.timeout = timeout if timeout is not None else settings.request_timeout

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = self.url(path)
        kwargs.setdefault("timeout", self.timeout)
        logger.debug("%s %s", method, url)

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error("Request %s %s failed: %s", method, url, e)
            raise ApiError(str(e)) from e

        if not response.ok:
            logger.warning("STATUS: %s BODY: %s", response.status_code, response.text)
            raise error_from_response(response)

        return response

    def get(self, path: str, **kwargs: Any) -> requests.Response:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, json: Any = None, **kwargs: Any) -> requests.Response:
        return self.request("POST", path, json=json, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> requests.Response:
        return self.request("DELETE", path, **kwargs)

    def close(self) -> None:
        self.session.close()
