import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import cv2
import numpy as np
import pytest


PROXY_VARS = ("http_proxy", "https_proxy", "all_proxy", "HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY")
DISPLAY_VARS = ("CI", "GITHUB_ACTIONS", "DISABLE_DISPLAY")


def make_jpeg(width=300, height=200):
    img = np.zeros((height, width, 3), dtype=np.uint8)
    img[:, : width // 2] = (255, 0, 0)
    cv2.rectangle(img, (20, 20), (120, 120), (0, 255, 0), -1)
    ok, buf = cv2.imencode(".jpg", img)
    assert ok
    return buf.tobytes()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # local test server must not go through a proxy; display vars would mask flag tests
    for name in PROXY_VARS + DISPLAY_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def image_server():
    """Threaded HTTP server on localhost serving a JPEG, a redirect, garbage and a 404."""
    jpeg = make_jpeg()
    seen = {"user_agents": []}

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            seen["user_agents"].append(self.headers.get("User-Agent"))
            if self.path == "/img.jpg":
                self._reply(200, jpeg, "image/jpeg")
            elif self.path == "/redirect":
                self.send_response(302)
                self.send_header("Location", "/img.jpg")
                self.send_header("Content-Length", "0")
                self.end_headers()
            elif self.path == "/garbage":
                self._reply(200, b"definitely not an image", "image/jpeg")
            elif self.path == "/empty":
                self._reply(200, b"", "image/jpeg")
            else:
                self._reply(404, b"not found", "text/plain")

        def _reply(self, code, body, ctype):
            self.send_response(code)
            self.send_header("Content-Type", ctype)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, *args):
            pass

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    base = f"http://127.0.0.1:{server.server_address[1]}"
    try:
        yield base, seen
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)
