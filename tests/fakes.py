from typing import Any, Dict, List, Optional

from monero_rpc.errors import TransportError


class FakeHttp:
    """Stands in for HttpClient; replies are keyed by URL or consumed in order."""

    def __init__(self, responses: Optional[List[Any]] = None, by_url: Optional[Dict[str, Any]] = None) -> None:
        self.responses = list(responses or [])
        self.by_url = dict(by_url or {})
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def post_json(self, url: str, payload: Any, auth: Any = None) -> Any:
        self.calls.append({"url": url, "payload": payload, "auth": auth})
        if url in self.by_url:
            response = self.by_url[url]
        elif self.responses:
            response = self.responses.pop(0)
        else:
            response = TransportError("connection refused", url=url)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True

    @property
    def urls(self) -> List[str]:
        return [call["url"] for call in self.calls]

    @property
    def methods(self) -> List[str]:
        return [call["payload"].get("method") for call in self.calls]
