"""Tests for submission collaborators."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import logging

import httpx

from fieldkit import submission
from fieldkit.submission import execute_action, make_submit_handler

VALUES = {"fullName": "Ali", "phoneNumber": "09123456789"}


class TestLogAction:
    def test_log(self, caplog):
        with caplog.at_level(logging.INFO, logger="fieldkit.submission"):
            result = execute_action("log", VALUES)
        assert result == {"action": "log", "status": "success", "data": VALUES}
        assert "09123456789" in caplog.text

    def test_unknown_action_falls_back_to_log(self):
        result = execute_action("carrier-pigeon", VALUES)
        assert result["action"] == "log"


class TestWebhookAction:
    def test_success(self, monkeypatch):
        calls = []

        def fake_post(url, json=None, timeout=None):
            calls.append((url, json))
            return httpx.Response(200, text="ok", request=httpx.Request("POST", url))

        monkeypatch.setattr(submission.httpx, "post", fake_post)
        result = execute_action("webhook:http://example.test/hook", VALUES)

        assert calls == [("http://example.test/hook", VALUES)]
        assert result["status"] == "success"
        assert result["status_code"] == 200

    def test_error_is_reported_not_raised(self, monkeypatch):
        def fake_post(url, json=None, timeout=None):
            return httpx.Response(500, request=httpx.Request("POST", url))

        monkeypatch.setattr(submission.httpx, "post", fake_post)
        result = execute_action("webhook:http://example.test/hook", VALUES)

        assert result["status"] == "error"

    def test_connection_error(self, monkeypatch):
        def fake_post(url, json=None, timeout=None):
            raise httpx.ConnectError("refused")

        monkeypatch.setattr(submission.httpx, "post", fake_post)
        result = execute_action("webhook:http://example.test/hook", VALUES)

        assert result == {"action": "webhook", "status": "error", "error": "refused"}


class TestMakeSubmitHandler:
    def test_callable_passthrough(self):
        received = []
        handler = make_submit_handler(received.append)
        handler(VALUES)
        assert received == [VALUES]

    def test_named_action(self):
        handler = make_submit_handler("log")
        assert handler(VALUES)["action"] == "log"

    def test_default_uses_setting(self, monkeypatch):
        monkeypatch.setattr(submission, "SUBMIT_ACTION", "log")
        handler = make_submit_handler()
        assert handler(VALUES)["status"] == "success"
