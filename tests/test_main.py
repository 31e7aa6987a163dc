from app import main
from app.config import settings


def test_run_serves_app_with_configured_host_and_port(monkeypatch):
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    main.run()

    assert calls == [
        (
            main.app,
            {"host": settings.HOST, "port": settings.PORT, "log_level": settings.LOG_LEVEL.lower()},
        )
    ]
