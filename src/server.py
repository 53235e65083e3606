# server.py
"""CloudLock API stub.

Only a health-check endpoint for now; vault traffic goes straight to
Supabase from the desktop client.
"""

import json
import logging
import os
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


class ApiHandler(BaseHTTPRequestHandler):
    def _send_json(self, status: int, body: dict):
        raw = json.dumps(body).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(raw)))
        self.send_header("Access-Control-Allow-Origin", "*")
        self.end_headers()
        self.wfile.write(raw)

    def do_GET(self):
        if self.path.split("?", 1)[0] == "/":
            self._send_json(200, {"message": "CloudLock API"})
            return
        self._send_json(404, {"error": "not found"})

    def do_OPTIONS(self):
        self.send_response(204)
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "GET, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type, Authorization")
        self.end_headers()

    def log_message(self, fmt, *args):
        logger.debug("%s - %s", self.address_string(), fmt % args)


def default_port() -> int:
    try:
        return int(os.getenv("PORT", DEFAULT_PORT))
    except ValueError:
        return DEFAULT_PORT


def make_server(host: str = "127.0.0.1", port: Optional[int] = None) -> HTTPServer:
    return HTTPServer((host, default_port() if port is None else port), ApiHandler)


def serve(host: str = "127.0.0.1", port: Optional[int] = None):
    server = make_server(host, port)
    logger.info("Server running on port %d", server.server_address[1])
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
