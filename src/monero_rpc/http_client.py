import logging
from typing import Any, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter
from requests.auth import HTTPBasicAuth, HTTPDigestAuth
from requests.cookies import extract_cookies_to_jar

from .errors import TransportError

logger = logging.getLogger(__name__)


class DeferredAuth(HTTPDigestAuth):
    """Credentials are only sent in answer to a 401 challenge.

    Digest challenges go through the regular digest handshake; Basic
    challenges are answered once with a Basic header.
    """

    def handle_401(self, r: requests.Response, **kwargs: Any) -> requests.Response:
        challenge = r.headers.get("www-authenticate", "")
        if r.status_code != 401 or not challenge.lower().startswith("basic"):
            return super().handle_401(r, **kwargs)
        if "Authorization" in r.request.headers:
            return r

        r.content
        r.close()
        prep = r.request.copy()
        extract_cookies_to_jar(prep._cookies, r.request, r.raw)
        prep.prepare_cookies(prep._cookies)
        prep = HTTPBasicAuth(self.username, self.password)(prep)

        retried = r.connection.send(prep, **kwargs)
        retried.history.append(r)
        retried.request = prep
        return retried


class HttpClient:
    def __init__(self, timeout: float, user_agent: str) -> None:
        self.timeout = timeout
        self.session = requests.Session()
        adapter = HTTPAdapter(max_retries=0)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
        self.session.headers.update({"User-Agent": user_agent})

    def post_json(self, url: str, payload: Any, auth: Optional[DeferredAuth] = None) -> Any:
        # Never log params or results: they carry passwords, seeds and keys.
        logger.debug("POST %s method=%s", url, payload.get("method") if isinstance(payload, dict) else None)
        try:
            response = self.session.post(url, json=payload, auth=auth, timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportError("RPC request failed", url=url, cause=exc) from exc

        status = response.status_code
        if not 200 <= status < 300:
            raise TransportError("RPC request returned non-2xx status", url=url, http_status=status, body=response.text)

        try:
            body = response.json()
        except ValueError as exc:
            raise TransportError("RPC response was not valid JSON", url=url, http_status=status, body=response.text, cause=exc) from exc
        logger.debug("response from %s (status %s)", url, status)
        return body

    def close(self) -> None:
        self.session.close()


def auth_for(credentials: Optional[Tuple[str, str]]) -> Optional[DeferredAuth]:
    if credentials is None:
        return None
    user, password = credentials
    return DeferredAuth(user, password)
