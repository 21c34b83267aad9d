import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Iterator

import pytest

FIXTURES = Path(__file__).resolve().parents[3] / "fixtures"


@pytest.fixture()
def startech_html() -> str:
    return (FIXTURES / "startech_search.html").read_text(encoding="utf-8")


@pytest.fixture()
def opencart_html() -> str:
    return (FIXTURES / "opencart_search.html").read_text(encoding="utf-8")


class _TrickleHandler(BaseHTTPRequestHandler):
    """Answers 200 then sends the body a few bytes at a time, forever."""

    chunk = b"<div>"
    interval = 0.2
    stop: threading.Event

    def do_GET(self) -> None:
        self.send_response(200)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(10_000_000))
        self.end_headers()
        try:
            while not self.stop.is_set():
                self.wfile.write(self.chunk)
                self.wfile.flush()
                time.sleep(self.interval)
        except (BrokenPipeError, ConnectionResetError):
            pass

    def log_message(self, format: str, *args) -> None:
        pass


def _serve(chunk: bytes) -> Iterator[str]:
    stop = threading.Event()
    handler = type(
        "Handler", (_TrickleHandler,), {"chunk": chunk, "stop": stop}
    )
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}/search?q={{query}}"
    finally:
        stop.set()
        server.shutdown()
        server.server_close()


@pytest.fixture()
def dripping_store_url() -> Iterator[str]:
    """Search URL template of a store sending one byte per interval."""
    yield from _serve(b"x")


@pytest.fixture()
def slow_store_url() -> Iterator[str]:
    """Search URL template of a store sending 2 KB per interval."""
    yield from _serve(b"x" * 2048)
