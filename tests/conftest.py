import json
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

from mandrill.api_clients.mandrill_client import MandrillClient
from mandrill.models.message import Message


class StubServer:
    """Local HTTP server replaying one canned response and recording requests."""

    def __init__(self):
        self.status = 200
        self.body = b""
        self.requests = []
        stub = self

        class Handler(BaseHTTPRequestHandler):
            def do_POST(self):
                length = int(self.headers.get("Content-Length", 0))
                raw = self.rfile.read(length)
                stub.requests.append({
                    "path": self.path,
                    "headers": dict(self.headers),
                    "json": json.loads(raw) if raw else None,
                })
                self.send_response(stub.status)
                self.send_header("Content-Length", str(len(stub.body)))
                self.end_headers()
                self.wfile.write(stub.body)

            def log_message(self, format, *args):
                pass

        self.httpd = HTTPServer(("127.0.0.1", 0), Handler)
        self.url = f"http://127.0.0.1:{self.httpd.server_port}"
        self.thread = threading.Thread(target=self.httpd.serve_forever, daemon=True)

    def respond(self, status: int, body=b""):
        self.status = status
        self.body = body if isinstance(body, bytes) else json.dumps(body).encode()

    @property
    def last_json(self):
        return self.requests[-1]["json"]


@pytest.fixture
def stub_server():
    server = StubServer()
    server.thread.start()
    yield server
    server.httpd.shutdown()
    server.httpd.server_close()


@pytest.fixture
def client():
    return MandrillClient(api_key="test-key", base_url="http://mandrill.invalid/api/1.0")


@pytest.fixture
def sample_message():
    return Message(
        html="<p> Test HTML </p>",
        text="Test Text",
        subject="Test Subject",
        from_email="test@email.com",
        from_name="Test Name",
    ).add_recipient("userTest@email.com", "test user")


@pytest.fixture
def sent_response():
    return [{
        "status": "sent",
        "email": "test@test.com",
        "reject_reason": "hard-bounce",
        "_id": "abc123",
    }]
