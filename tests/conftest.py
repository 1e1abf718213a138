import json

import pytest

from transmote.transport import Transport


class FakeTransport(Transport):
    """In-memory transport replaying canned daemon replies."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.requests = []

    def post(self, body):
        self.requests.append(json.loads(body))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, bytes):
            return reply
        return json.dumps(reply).encode()


@pytest.fixture
def fake_transport():
    return FakeTransport


@pytest.fixture
def torrent_file(tmp_path):
    path = tmp_path / "ubuntu.torrent"
    path.write_bytes(b"d8:announce35:http://tracker.example.com/announce4:infod4:name6:ubuntuee")
    return path
