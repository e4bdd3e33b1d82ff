from __future__ import annotations

"""
Simple TCP REPL server for typelisp.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(defun double (x) (+ x x))"}
- Response: {"ok": true, "result": <printed value>} or {"ok": false, "error": <message>}

Lisp errors are ordinary printed results ("<error: ...>"); "ok": false is
reserved for malformed requests. One Interpreter is kept alive so that
definitions persist across requests and connections. Evaluation is
serialized so the interpreter only ever runs one form at a time.
"""

import json
import logging
import socket
import threading
from typing import Any, Dict, Tuple

from typelisp.config import get_log_level, get_repl_address
from typelisp.interpreter import Interpreter

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None, interp: Interpreter | None = None):
        default_host, default_port = get_repl_address()
        self.host = host if host is not None else default_host
        self.port = port if port is not None else default_port
        # Keep a single interpreter to maintain session state
        self.interp = interp if interp is not None else Interpreter()
        self._lock = threading.Lock()

    def handle_request(self, line: bytes) -> Dict[str, Any]:
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        if not isinstance(req, dict):
            return {"ok": False, "error": "Invalid request: expected a JSON object"}
        if req.get("cmd") != "eval":
            return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: code must be a string"}
        with self._lock:
            result = self.interp.rep(code)
        logger.debug("eval %r -> %s", code, result)
        return {"ok": True, "result": result}

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("typelisp REPL listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.info("client connected: %s:%d", *addr)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = self.handle_request(line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.info("client disconnected: %s:%d", *addr)


def main() -> None:
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    ReplServer().serve_forever()


if __name__ == "__main__":
    main()
