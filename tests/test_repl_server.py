import json

import pytest

from typelisp_lsp.repl_server import ReplServer


@pytest.fixture
def server():
    return ReplServer(host="127.0.0.1", port=0)


def request(server, payload):
    return server.handle_request(json.dumps(payload).encode("utf-8"))


def test_eval_request(server):
    assert request(server, {"cmd": "eval", "code": "(+ 1 2)"}) == {"ok": True, "result": "3"}


def test_definitions_persist_between_requests(server):
    request(server, {"cmd": "eval", "code": "(defun double (x) (+ x x))"})
    assert request(server, {"cmd": "eval", "code": "(double 21)"}) == {"ok": True, "result": "42"}


def test_lisp_errors_are_ordinary_results(server):
    resp = request(server, {"cmd": "eval", "code": "(car"})
    assert resp == {"ok": True, "result": "<error: unfinished parenthesis>"}


@pytest.mark.parametrize(
    "line, message",
    [
        (b"not json", "Invalid request"),
        (b"[1, 2]", "Invalid request: expected a JSON object"),
        (b'{"cmd": "shutdown"}', "Unknown cmd: shutdown"),
        (b'{"cmd": "eval", "code": 12}', "Invalid request: code must be a string"),
    ],
)
def test_malformed_requests(server, line, message):
    resp = server.handle_request(line)
    assert resp["ok"] is False
    assert resp["error"].startswith(message)


def test_address_from_environment(monkeypatch):
    monkeypatch.setenv("TYPELISP_REPL_HOST", "0.0.0.0")
    monkeypatch.setenv("TYPELISP_REPL_PORT", "9999")
    server = ReplServer()
    assert (server.host, server.port) == ("0.0.0.0", 9999)
