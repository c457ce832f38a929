import json

import httpx
from rich.console import Console
from typer.testing import CliRunner

from cfptime import CfpTime, SyncTransport, cli
from cfptime.config import ClientConfig

from conftest import Server, conf_row


def _patch_client(monkeypatch, server):
    captured = {}

    def fake_make_client(base_url=None, timeout_s=None):
        captured["base_url"] = base_url
        captured["timeout_s"] = timeout_s
        client = httpx.Client(transport=httpx.MockTransport(server.handler))
        return CfpTime(transport=SyncTransport(ClientConfig(base_url="http://cfptime.test"), client=client))

    monkeypatch.setattr(cli, "make_client", fake_make_client)
    # wide console so table cells do not wrap
    monkeypatch.setattr(cli, "console", Console(width=200))
    return captured


def test_cli_cfps_table(monkeypatch):
    server = Server()
    server.add("/api/cfps/", [conf_row(id=1, name="PyCon", cfp_deadline="2025-12-19")])
    captured = _patch_client(monkeypatch, server)

    runner = CliRunner()
    result = runner.invoke(cli.app, ["--base-url", "http://other.test", "cfps"])

    assert result.exit_code == 0
    assert "PyCon" in result.stdout
    assert "2025-12-19" in result.stdout
    assert captured["base_url"] == "http://other.test"


def test_cli_cfp_json(monkeypatch):
    server = Server()
    server.add("/api/cfps/5", conf_row())
    _patch_client(monkeypatch, server)

    result = CliRunner().invoke(cli.app, ["cfp", "5", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["id"] == 5
    assert data["name"] == "FooConf"


def test_cli_conf_not_found(monkeypatch):
    _patch_client(monkeypatch, Server())

    result = CliRunner().invoke(cli.app, ["conf", "77"])

    assert result.exit_code == 1
    assert "Not found" in result.stdout


def test_cli_server_error(monkeypatch):
    server = Server()
    server.add("/api/upcoming/", "boom", status=500)
    _patch_client(monkeypatch, server)

    result = CliRunner().invoke(cli.app, ["upcoming"])

    assert result.exit_code == 1
    assert "Error" in result.stdout


def test_cli_empty_list(monkeypatch):
    server = Server()
    server.add("/api/confs/", [])
    _patch_client(monkeypatch, server)

    result = CliRunner().invoke(cli.app, ["confs"])

    assert result.exit_code == 0
    assert "No conferences" in result.stdout


def test_cli_renders_bracketed_text(monkeypatch):
    server = Server()
    server.add("/api/cfps/", [conf_row(id=1, name="Conf [/oops]", city="[bold]Lyon")])
    server.add("/api/cfps/1", conf_row(id=1, name="Conf [/oops]", twitter="[link]"))
    _patch_client(monkeypatch, server)

    result = CliRunner().invoke(cli.app, ["cfps"])
    assert result.exit_code == 0
    assert "Conf [/oops]" in result.stdout
    assert "[bold]Lyon" in result.stdout

    result = CliRunner().invoke(cli.app, ["cfp", "1"])
    assert result.exit_code == 0
    assert "[link]" in result.stdout


def test_cli_bad_timeout_env(monkeypatch):
    monkeypatch.setenv("CFPTIME_TIMEOUT", "soon")
    monkeypatch.setattr(cli, "console", Console(width=200))

    result = CliRunner().invoke(cli.app, ["cfps"])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "CFPTIME_TIMEOUT" in result.stdout
