import pytest
import yaml

from transmote import config


def write_config(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return str(path)


def test_setup_config_loads_daemon_section(tmp_path):
    path = write_config(
        tmp_path / "config.yml",
        {
            "global": {"loglevel": "debug"},
            "daemon": {"url": "http://localhost:9091/transmission/rpc", "username": "admin", "password": "x", "timeout": 10},
        },
    )
    cfg = config.setup_config(path)
    assert cfg.global_config.loglevel == "debug"
    assert cfg.daemon.url == "http://localhost:9091/transmission/rpc"
    assert cfg.daemon.username == "admin"
    assert cfg.daemon.timeout == 10.0


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")
    cfg = config.setup_config(str(path))
    assert cfg.global_config.loglevel == "info"
    assert cfg.daemon is None


@pytest.mark.parametrize(
    "data",
    [
        {"global": {"loglevel": "verbose"}},
        {"daemon": {"username": "admin"}},
        {"daemon": {"url": "ftp://localhost"}},
        {"daemon": {"url": "http://localhost:9091", "timeout": 0}},
        {"daemon": "http://localhost:9091"},
    ],
)
def test_invalid_config(tmp_path, data):
    path = write_config(tmp_path / "config.yml", data)
    with pytest.raises(ValueError):
        config.setup_config(path)


def test_broken_yaml(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("daemon: [unclosed", encoding="utf-8")
    with pytest.raises(ValueError):
        config.setup_config(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(ValueError, match="not found"):
        config.setup_config(str(tmp_path / "nope.yml"))


def test_default_config_is_loadable(tmp_path):
    path = config.create_default_config(str(tmp_path / "sub" / "config.yml"))
    cfg = config.setup_config(path)
    assert cfg.daemon.url == "http://localhost:9091/transmission/rpc"


def test_init_config_creates_default_and_exits(tmp_path):
    target = tmp_path / "config.yml"
    with pytest.raises(SystemExit) as excinfo:
        config.init_config(str(target))
    assert excinfo.value.code == 0
    assert target.exists()


def test_init_config_sets_global(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "cfg", None)
    path = write_config(tmp_path / "config.yml", {"daemon": {"url": "http://localhost:9091"}})
    cfg = config.init_config(path)
    assert config.cfg is cfg


def test_user_config_path(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "user_config_dir", lambda appname: str(tmp_path / appname))
    assert config.get_user_config_path() == str(tmp_path / "transmote" / "config.yml")
