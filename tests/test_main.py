import pytest

import rssagg.__main__ as launcher


@pytest.fixture()
def served(monkeypatch):
    """Capture uvicorn.run calls instead of starting a server"""
    calls = []
    monkeypatch.setattr(launcher.uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))
    return calls


@pytest.mark.parametrize(
    "env",
    [
        {"DB_URL": "postgres://localhost/rssagg"},
        {"PORT": "", "DB_URL": "postgres://localhost/rssagg"},
        {"PORT": "8080"},
        {"PORT": "8080", "DB_URL": ""},
    ],
)
def test_exits_when_port_or_db_url_unset(monkeypatch, caplog, served, env):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("DB_URL", raising=False)
    for name, value in env.items():
        monkeypatch.setenv(name, value)

    with pytest.raises(SystemExit) as exc_info:
        launcher.main()

    assert exc_info.value.code == 1
    assert "Missing or invalid environment variables" in caplog.text
    assert served == []


def test_serves_on_configured_port(monkeypatch, served):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("DB_URL", "sqlite+aiosqlite://")

    launcher.main()

    assert len(served) == 1
    assert served[0]["port"] == 9090
