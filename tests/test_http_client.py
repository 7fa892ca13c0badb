import base64
import unittest

import requests

from monero_rpc.errors import TransportError
from monero_rpc.http_client import DeferredAuth, HttpClient, auth_for
from monero_rpc.wallet import WalletRPC

URL = "http://127.0.0.1:18082/json_rpc"


class _FakeResponse:
    def __init__(self, status_code=200, body=None, text="") -> None:
        self.status_code = status_code
        self.body = body
        self.text = text

    def json(self):
        if self.body is None:
            raise ValueError("No JSON object could be decoded")
        return self.body


class _FakeSession:
    def __init__(self, outcome) -> None:
        self.outcome = outcome
        self.posts = []

    def post(self, url, json=None, auth=None, timeout=None):
        self.posts.append({"url": url, "json": json, "auth": auth, "timeout": timeout})
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome

    def close(self) -> None:
        pass


class _FakeConnection:
    def __init__(self) -> None:
        self.sent = []

    def send(self, request, **kwargs):
        self.sent.append(request)
        response = requests.Response()
        response.status_code = 200
        response._content = b"{}"
        response.request = request
        return response


class HttpClientTests(unittest.TestCase):
    def _client(self, outcome) -> HttpClient:
        client = HttpClient(timeout=2.5, user_agent="test")
        client.session = _FakeSession(outcome)
        return client

    def test_post_json_returns_parsed_body(self) -> None:
        client = self._client(_FakeResponse(body={"result": {"height": 12}}))

        body = client.post_json(URL, {"method": "get_height"})

        self.assertEqual(body, {"result": {"height": 12}})
        self.assertEqual(client.session.posts[0]["timeout"], 2.5)
        self.assertEqual(client.session.posts[0]["json"], {"method": "get_height"})

    def test_connection_error_becomes_transport_error(self) -> None:
        client = self._client(requests.ConnectionError("refused"))
        with self.assertRaises(TransportError) as ctx:
            client.post_json(URL, {})
        self.assertIsInstance(ctx.exception.cause, requests.ConnectionError)
        self.assertEqual(ctx.exception.url, URL)

    def test_timeout_becomes_transport_error(self) -> None:
        client = self._client(requests.Timeout("slow"))
        with self.assertRaises(TransportError):
            client.post_json(URL, {})

    def test_non_2xx_status_becomes_transport_error(self) -> None:
        client = self._client(_FakeResponse(status_code=401, text="Unauthorized"))
        with self.assertRaises(TransportError) as ctx:
            client.post_json(URL, {})
        self.assertEqual(ctx.exception.http_status, 401)

    def test_non_json_body_becomes_transport_error(self) -> None:
        client = self._client(_FakeResponse(status_code=200, body=None, text="<html>"))
        with self.assertRaises(TransportError) as ctx:
            client.post_json(URL, {})
        self.assertEqual(ctx.exception.body, "<html>")


class _SequencedSession(_FakeSession):
    def __init__(self, outcomes) -> None:
        super().__init__(None)
        self.outcomes = list(outcomes)

    def post(self, url, json=None, auth=None, timeout=None):
        self.outcome = self.outcomes.pop(0)
        return super().post(url, json=json, auth=auth, timeout=timeout)


class TrafficLoggingTests(unittest.TestCase):
    def test_secrets_stay_out_of_debug_log(self) -> None:
        wallet = WalletRPC.from_fields(user="rpc", password="pw")
        wallet.http.session = _SequencedSession(
            [
                _FakeResponse(body={"id": "0", "jsonrpc": "2.0", "result": {}}),
                _FakeResponse(body={"id": "0", "jsonrpc": "2.0", "result": {"key": "secret mnemonic words"}}),
            ]
        )

        with self.assertLogs("monero_rpc", level="DEBUG") as logs:
            wallet.open_wallet("w", password="hunter2")
            self.assertEqual(wallet.mnemonic(), {"key": "secret mnemonic words"})

        output = "\n".join(logs.output)
        self.assertIn("open_wallet", output)
        self.assertIn("query_key", output)
        self.assertNotIn("hunter2", output)
        self.assertNotIn("secret mnemonic words", output)
        self.assertEqual(wallet.http.session.posts[0]["json"]["params"]["password"], "hunter2")


class DeferredAuthTests(unittest.TestCase):
    def _prepared(self, auth: DeferredAuth) -> requests.PreparedRequest:
        return auth(requests.Request("POST", URL, json={"method": "get_version"}).prepare())

    def test_first_request_carries_no_credentials(self) -> None:
        prepared = self._prepared(DeferredAuth("user", "pw"))
        self.assertNotIn("Authorization", prepared.headers)

    def test_basic_challenge_is_answered_once(self) -> None:
        auth = DeferredAuth("user", "pw")
        prepared = self._prepared(auth)
        connection = _FakeConnection()

        challenge = requests.Response()
        challenge.status_code = 401
        challenge.headers["WWW-Authenticate"] = 'Basic realm="monero-rpc"'
        challenge._content = b""
        challenge._content_consumed = True
        challenge.request = prepared
        challenge.connection = connection

        answered = auth.handle_401(challenge)

        expected = "Basic " + base64.b64encode(b"user:pw").decode("ascii")
        self.assertEqual(answered.status_code, 200)
        self.assertEqual(len(connection.sent), 1)
        self.assertEqual(connection.sent[0].headers["Authorization"], expected)
        self.assertIs(answered.history[0], challenge)

    def test_auth_for_without_credentials(self) -> None:
        self.assertIsNone(auth_for(None))
        self.assertIsInstance(auth_for(("user", "")), DeferredAuth)


if __name__ == "__main__":
    unittest.main()
