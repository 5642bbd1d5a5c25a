"""XML-RPC client for the supervisord HTTP interface."""

from collections.abc import Sequence
from typing import Any

import requests

from ...utils.get_logger import get_logger
from ...utils.get_package_version import get_package_version
from ..errors import RpcDecodeError, RpcTransportError
from .decode_value import decode_value
from .encode_call import encode_call
from .parse_response import parse_response

logger = get_logger("rpc")

DEFAULT_TIMEOUT_SECS = 10.0


class RpcClient:
    """Performs single XML-RPC calls over HTTP POST.

    Redirects are never followed, so a call cannot be bounced to another
    endpoint together with its credentials.
    """

    def __init__(
        self,
        url: str,
        username: str = "",
        password: str = "",
        timeout: float = DEFAULT_TIMEOUT_SECS,
        session: requests.Session | None = None,
    ):
        self.url = url
        self.username = username
        self.password = password
        self.timeout = timeout
        self._session = session or requests.Session()

    @property
    def auth(self) -> tuple[str, str] | None:
        if self.username and self.password:
            return (self.username, self.password)
        return None

    def call(self, method: str, params: Sequence[Any] | None = None) -> Any:
        """Invoke ``method`` and return the decoded result (None if empty).

        Raises:
            RpcTransportError: Connection failure or non-2xx status
            RpcDecodeError: Malformed response body
            RpcFaultError: Fault reported by supervisord
        """
        body = encode_call(method, params)
        headers = {
            "Content-Type": "text/xml",
            "User-Agent": f"sv-supervisor-client/{get_package_version()}",
        }
        logger.debug("XML-RPC call %s -> %s", method, self.url)
        try:
            response = self._session.post(
                self.url,
                data=body,
                headers=headers,
                auth=self.auth,
                timeout=self.timeout,
                allow_redirects=False,
            )
        except requests.RequestException as e:
            raise RpcTransportError(f"Request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise RpcTransportError(
                f"HTTP error: {response.status_code}, {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        if not response.content:
            raise RpcDecodeError("Empty response body")
        value = parse_response(response.content)
        if value is None:
            return None
        return decode_value(value)

    def get_all_process_info(self) -> Any:
        """Raw result of ``supervisor.getAllProcessInfo``."""
        return self.call("supervisor.getAllProcessInfo")
