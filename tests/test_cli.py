from automata_console.cli import app
from typer.testing import CliRunner

runner = CliRunner()


def test_resolve_command() -> None:
    result = runner.invoke(app, ["resolve", "deploy the frontend"])

    assert result.exit_code == 0
    assert "deployment_orchestration" in result.output
    assert "execute staged rollout" in result.output


def test_resolve_rejects_blank_task() -> None:
    result = runner.invoke(app, ["resolve", "   "])

    assert result.exit_code == 1


def test_intents_command() -> None:
    result = runner.invoke(app, ["intents"])

    assert result.exit_code == 0
    assert "Intent rules" in result.output


def test_serve_passes_explicit_port_zero(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr("uvicorn.run", lambda *args, **kwargs: calls.append(kwargs))

    result = runner.invoke(app, ["serve", "--host", "127.0.0.1", "--port", "0"])

    assert result.exit_code == 0
    assert calls == [{"host": "127.0.0.1", "port": 0, "reload": False}]


def test_serve_defaults_from_settings(monkeypatch) -> None:
    from automata_console.config import settings

    calls = []
    monkeypatch.setattr("uvicorn.run", lambda *args, **kwargs: calls.append(kwargs))

    result = runner.invoke(app, ["serve"])

    assert result.exit_code == 0
    assert calls[0]["host"] == settings.API_HOST
    assert calls[0]["port"] == settings.API_PORT
