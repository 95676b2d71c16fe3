"""
Tests for the HTTP transport – session factory, URL helpers and error
conversion.
"""

import unittest
from unittest.mock import MagicMock

import requests

from netgear_console.errors import NetworkError
from netgear_console.network.client import Transport, base_url, build_session, with_query


class TestBuildSession(unittest.TestCase):
    def test_session_has_keep_alive(self):
        session = build_session()
        self.assertEqual(session.headers["Connection"], "keep-alive")

    def test_session_has_user_agent(self):
        session = build_session()
        self.assertIn("netgear-console", session.headers["User-Agent"])

    def test_no_retries(self):
        adapter = build_session().get_adapter("http://192.168.0.1/")
        self.assertEqual(adapter.max_retries.total, 0)

    def test_cookies_are_not_stored(self):
        session = build_session()
        policy = session.cookies.get_policy()
        self.assertEqual(policy.allowed_domains(), ())


class TestUrlHelpers(unittest.TestCase):
    def test_base_url(self):
        self.assertEqual(base_url("192.168.0.239"), "http://192.168.0.239")
        self.assertEqual(base_url("switch.lan:8080/"), "http://switch.lan:8080")
        self.assertEqual(base_url("https://switch.lan"), "https://switch.lan")

    def test_with_query(self):
        self.assertEqual(with_query("/a.html", {}), "/a.html")
        self.assertEqual(with_query("/a.html", {"Gambit": "t k"}), "/a.html?Gambit=t+k")
        self.assertEqual(with_query("/a.html?x=1", {"Gambit": "t"}), "/a.html?x=1&Gambit=t")


class TestTransport(unittest.TestCase):
    def setUp(self):
        self.session = MagicMock()
        self.transport = Transport("192.168.0.239", timeout=3, session=self.session)

    def test_get_disables_redirects_and_sets_timeout(self):
        resp = MagicMock(spec=requests.Response)
        resp.status_code = 302
        resp.content = b""
        self.session.request.return_value = resp

        self.assertIs(self.transport.get("/", headers={"Cookie": "SID=x"}), resp)
        self.session.request.assert_called_once_with(
            "GET",
            "http://192.168.0.239/",
            data=None,
            headers={"Cookie": "SID=x"},
            timeout=3,
            allow_redirects=False,
        )

    def test_post_sends_form(self):
        resp = MagicMock(spec=requests.Response)
        resp.status_code = 200
        resp.content = b"ok"
        self.session.request.return_value = resp

        self.transport.post("/login.cgi", data={"password": "abc"})

        _, kwargs = self.session.request.call_args
        self.assertEqual(kwargs["data"], {"password": "abc"})

    def test_timeout_becomes_network_error(self):
        exc = requests.ConnectTimeout("slow")
        self.session.request.side_effect = exc
        with self.assertRaises(NetworkError) as ctx:
            self.transport.get("/")
        self.assertIs(ctx.exception.cause, exc)
        self.assertIn("timed out after 3s", ctx.exception.message)

    def test_connection_error_becomes_network_error(self):
        self.session.request.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(NetworkError) as ctx:
            self.transport.post("/login.cgi")
        self.assertEqual(str(ctx.exception), "network error: POST /login.cgi failed: refused")


if __name__ == "__main__":
    unittest.main()
