"""命令行测试"""

import json

import pytest
from typer.testing import CliRunner

from hostentry.cli import app

runner = CliRunner()


@pytest.fixture
def hosts(make_hosts_file):
    return make_hosts_file(["127.0.0.1\tlocalhost", "10.0.0.1\talpha\tbeta"])


def _invoke(hosts, *args):
    return runner.invoke(app, ["--hosts-file", str(hosts), *args])


def test_get_present(hosts) -> None:
    result = _invoke(hosts, "get", "--hostname", "beta")

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "hostName": "beta",
        "ipAddress": "10.0.0.1",
        "comment": None,
        "ensure": "Present",
    }


def test_get_absent(hosts) -> None:
    result = _invoke(hosts, "get", "-n", "gamma")

    assert result.exit_code == 0
    assert json.loads(result.stdout)["ensure"] == "Absent"


def test_test_exit_codes(hosts) -> None:
    in_state = _invoke(hosts, "test", "-n", "alpha", "--ip", "10.0.0.1")
    drifted = _invoke(hosts, "test", "-n", "alpha", "--ip", "10.0.0.2")

    assert in_state.exit_code == 0
    assert json.loads(in_state.stdout)["inDesiredState"] is True
    assert drifted.exit_code == 1
    assert json.loads(drifted.stdout)["inDesiredState"] is False


def test_set_then_set_again(hosts) -> None:
    first = _invoke(hosts, "set", "-n", "alpha", "--ip", "10.0.0.2")
    second = _invoke(hosts, "set", "-n", "alpha", "--ip", "10.0.0.2")

    assert first.exit_code == 0
    assert json.loads(first.stdout)["changed"] is True
    assert json.loads(first.stdout)["ipAddress"] == "10.0.0.2"
    assert json.loads(second.stdout)["changed"] is False
    assert hosts.read_text(encoding="utf-8").splitlines() == [
        "127.0.0.1\tlocalhost",
        "10.0.0.1\tbeta",
        "10.0.0.2\talpha",
    ]


def test_set_absent(hosts) -> None:
    result = _invoke(hosts, "set", "-n", "beta", "--ensure", "Absent")

    assert result.exit_code == 0
    assert json.loads(result.stdout)["ensure"] == "Absent"
    assert hosts.read_text(encoding="utf-8").splitlines()[1] == "10.0.0.1\talpha"


def test_set_present_without_ip_is_usage_error(hosts) -> None:
    before = hosts.read_bytes()

    result = _invoke(hosts, "set", "-n", "gamma")

    assert result.exit_code == 2
    assert hosts.read_bytes() == before


def test_invalid_ensure(hosts) -> None:
    assert _invoke(hosts, "test", "-n", "alpha", "--ensure", "Sometimes").exit_code == 2


def test_missing_hosts_file(tmp_path) -> None:
    result = runner.invoke(app, ["--hosts-file", str(tmp_path / "missing"), "get", "-n", "alpha"])

    assert result.exit_code == 1


def test_hosts_file_from_env(hosts, monkeypatch) -> None:
    monkeypatch.setenv("HOSTS_FILE", str(hosts))

    result = runner.invoke(app, ["get", "-n", "localhost"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["ipAddress"] == "127.0.0.1"


def test_invalid_log_level(hosts) -> None:
    result = _invoke(hosts, "--log-level", "chatty", "get", "-n", "alpha")

    assert result.exit_code == 2


def test_get_with_undecodable_comment(tmp_path) -> None:
    hosts = tmp_path / "hosts"
    hosts.write_bytes(b"10.0.0.1 web # caf\xe9\n")

    result = runner.invoke(app, ["--hosts-file", str(hosts), "get", "-n", "web"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["ipAddress"] == "10.0.0.1"
