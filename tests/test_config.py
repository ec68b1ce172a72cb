"""配置加载测试"""

import pytest

from hostentry.config import Config


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("HOSTS_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    config = Config.from_env()

    assert config.hosts_file_path == "/etc/hosts"
    assert config.log_level == "WARNING"
    config.validate()


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("HOSTS_FILE", "/tmp/custom-hosts")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Config.from_env()

    assert config.hosts_file_path == "/tmp/custom-hosts"
    assert config.log_level == "DEBUG"


def test_invalid_log_level() -> None:
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Config(log_level="LOUD").validate()


def test_empty_hosts_path() -> None:
    with pytest.raises(ValueError, match="HOSTS_FILE"):
        Config(hosts_file_path="").validate()
