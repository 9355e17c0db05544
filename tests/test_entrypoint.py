import uvicorn

from mediashelf import __main__ as entrypoint
from mediashelf.config.settings import settings


def test_main_serves_on_configured_host_and_port(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **options: calls.append((app, options)))
    monkeypatch.setattr(settings, "HOST", "127.0.0.1")
    monkeypatch.setattr(settings, "PORT", 8123)

    entrypoint.main()

    [(app, options)] = calls
    assert app == "mediashelf.api.main:app"
    assert options["host"] == "127.0.0.1"
    assert options["port"] == 8123
