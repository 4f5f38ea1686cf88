"""HTTP server: POST a save file to /<entity_type> and get its JSON back."""

from __future__ import annotations

import argparse
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import List, Optional, Tuple
from urllib.parse import urlsplit

from .api import map_to_json
from .errors import ParseError

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
_FAILURES = (ParseError, EOFError, UnicodeDecodeError)


def handle(method: str, path: str, body: bytes) -> Tuple[int, str]:
    """Answer one request: status 200 with JSON, or 404 with the error message."""
    if method != "POST":
        return 404, str(ParseError("no method"))
    try:
        return 200, map_to_json(path[1:], body)
    except _FAILURES as err:
        return 404, str(err)


class ParseRequestHandler(BaseHTTPRequestHandler):
    """Routes requests through :func:`handle`."""

    def _path(self) -> str:
        return urlsplit(self.path).path

    def _respond(self, status: int, text: str) -> None:
        payload = text.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def do_POST(self) -> None:
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length)
        self._respond(*handle("POST", self._path(), body))

    def do_GET(self) -> None:
        self._respond(*handle("GET", self._path(), b""))

    def log_message(self, format: str, *args: object) -> None:
        pass


def serve(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Serve requests until interrupted."""
    with ThreadingHTTPServer((host, port), ParseRequestHandler) as httpd:
        httpd.serve_forever()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="gdsaveparse-server", description="Serve save-file parsing over HTTP.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        serve(args.host, args.port)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())