import pytest

from transmote import cli, config
from transmote.client import TransmissionClient
from transmote.errors import TransportError


@pytest.fixture
def use_transport(monkeypatch, fake_transport):
    """Route the CLI's client through a fake transport with the given replies."""

    def install(*replies):
        transport = fake_transport(*replies)
        monkeypatch.setattr(
            TransmissionClient, "from_url", classmethod(lambda cls, url, **kwargs: cls(transport))
        )
        return transport

    monkeypatch.setattr(config, "cfg", None)
    return install


def test_list_sorted_by_name(use_transport, capsys):
    use_transport({"arguments": {"torrents": [{"id": 1, "name": "b"}, {"id": 2, "name": "a"}]}, "result": "success"})
    cli.main(["--url", "http://localhost:9091", "list", "--sort", "name"])
    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[-1] for line in lines] == ["a", "b"]


def test_list_sorted_by_id_descending(use_transport, capsys):
    use_transport({"arguments": {"torrents": [{"id": 1, "name": "b"}, {"id": 2, "name": "a"}]}, "result": "success"})
    cli.main(["--url", "http://localhost:9091", "list", "--sort", "id", "--reverse"])
    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines] == ["2", "1"]


def test_show(use_transport, capsys):
    use_transport(
        {
            "arguments": {
                "torrents": [
                    {
                        "id": 4,
                        "name": "iso",
                        "status": 6,
                        "percentDone": 1,
                        "hashString": "abc",
                        "files": [{"name": "iso/a.img", "length": 10, "bytesCompleted": 10}],
                    }
                ]
            },
            "result": "success",
        }
    )
    cli.main(["--url", "http://localhost:9091", "show", "4"])
    out = capsys.readouterr().out
    assert "seed" in out
    assert "hash: abc" in out
    assert "iso/a.img" in out


def test_add_magnet(use_transport):
    transport = use_transport(
        {"arguments": {"torrent-added": {"hashString": "abc", "id": 9, "name": "iso"}}, "result": "success"}
    )
    cli.main(["--url", "http://localhost:9091", "add", "--magnet", "magnet:?xt=urn:btih:abc", "--download-dir", "/dl", "--paused"])
    args = transport.requests[0]["arguments"]
    assert transport.requests[0]["method"] == "torrent-add"
    assert args["filename"] == "magnet:?xt=urn:btih:abc"
    assert args["download-dir"] == "/dl"
    assert args["paused"] is True


def test_add_missing_file_exits(use_transport, tmp_path):
    transport = use_transport()
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--url", "http://localhost:9091", "add", "--file", str(tmp_path / "missing.torrent")])
    assert excinfo.value.code == 1
    assert transport.requests == []


def test_set_options(use_transport):
    transport = use_transport({"result": "success"})
    cli.main(["--url", "http://localhost:9091", "set", "3", "--resumed", "--location", "/data"])
    request = transport.requests[0]
    assert request["method"] == "torrent-set"
    assert request["arguments"]["ids"] == [3]
    assert request["arguments"]["paused"] is False
    assert request["arguments"]["location"] == "/data"
    assert "download-dir" not in request["arguments"]


def test_remove_with_data(use_transport):
    transport = use_transport({"result": "success"})
    cli.main(["--url", "http://localhost:9091", "remove", "3", "--delete-data"])
    assert transport.requests[0]["arguments"]["delete-local-data"] is True


def test_transport_failure_exits(use_transport):
    use_transport(TransportError("connection refused"))
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--url", "http://localhost:9091", "start", "1"])
    assert excinfo.value.code == 1


def test_config_without_daemon_exits(use_transport, tmp_path):
    use_transport()
    path = tmp_path / "config.yml"
    path.write_text("global:\n  loglevel: info\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--config", str(path), "list"])
    assert excinfo.value.code == 1


def test_daemon_from_config(use_transport, tmp_path, capsys):
    use_transport({"result": "success"})
    path = tmp_path / "config.yml"
    path.write_text("daemon:\n  url: http://localhost:9091/transmission/rpc\n", encoding="utf-8")
    cli.main(["--config", str(path), "verify", "2"])
    assert config.cfg.daemon.url == "http://localhost:9091/transmission/rpc"
