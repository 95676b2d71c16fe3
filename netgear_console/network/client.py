"""
HTTP transport for talking to the switch's web console.

Redirects are never followed: the GS316 login answers with a redirect whose
``Location`` may carry the Gambit token, and the GS30x root page redirects to
the login page, which is itself a model-detection signal.
"""

from __future__ import annotations

import http.cookiejar
import urllib.parse

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import DEFAULT_TIMEOUT, USER_AGENT
from ..errors import NetworkError
from ..logging_setup import log


def build_session() -> requests.Session:
    """
    Return a requests.Session with keep-alive and no automatic retries.

    Failed calls must surface to the caller exactly once, so the adapter's
    retry budget is zero.  Cookies are never stored in the session jar; the
    session credential is attached explicitly to each request.
    """
    session = requests.Session()
    adapter = HTTPAdapter(max_retries=Retry(total=0, redirect=False, raise_on_status=False))
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.cookies.set_policy(http.cookiejar.DefaultCookiePolicy(allowed_domains=[]))
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Connection": "keep-alive",
    })
    return session


def base_url(address: str) -> str:
    """
    Build the base URL for the switch.

    Args:
        address: IP address or hostname, optionally with a port or scheme

    Returns:
        Base URL string without a trailing slash (e.g. 'http://192.168.0.239')
    """
    address = address.rstrip("/")
    if address.startswith(("http://", "https://")):
        return address
    return f"http://{address}"


def with_query(path: str, data: dict[str, str] | None) -> str:
    """Append *data* to *path* as a urlencoded query string."""
    if not data:
        return path
    sep = "&" if "?" in path else "?"
    return f"{path}{sep}{urllib.parse.urlencode(data)}"


class Transport:
    """Thin GET/POST wrapper bound to one switch address."""

    def __init__(
        self,
        address: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url(address)
        self.timeout = timeout
        self.session = session if session is not None else build_session()

    def get(self, path: str, headers: dict[str, str] | None = None) -> requests.Response:
        return self._request("GET", path, headers=headers)

    def post(
        self,
        path: str,
        data: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        return self._request("POST", path, data=data, headers=headers)

    def _request(
        self,
        method: str,
        path: str,
        data: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        url = self.base_url + path
        log.debug("%s %s", method, url)
        try:
            resp = self.session.request(
                method,
                url,
                data=data,
                headers=headers,
                timeout=self.timeout,
                allow_redirects=False,
            )
        except requests.Timeout as exc:
            raise NetworkError(f"{method} {path} timed out after {self.timeout}s", exc) from exc
        except requests.RequestException as exc:
            raise NetworkError(f"{method} {path} failed", exc) from exc
        log.debug("HTTP %s from %s (%d bytes)", resp.status_code, url, len(resp.content))
        return resp

    def close(self) -> None:
        self.session.close()
