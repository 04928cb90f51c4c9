from __future__ import annotations

from app.core.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("NEARBY_RADIUS_MILES", "OWNER_ROLE_TOPIC", "EVENT_SINK_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.NEARBY_RADIUS_MILES == 10.0
        assert settings.OWNER_ROLE_TOPIC == "user-role-updates"
        assert settings.EVENT_SINK_TIMEOUT == 5.0

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("NEARBY_RADIUS_MILES", "2.5")
        monkeypatch.setenv("EVENT_SINK_URL", "http://sink.local")
        settings = Settings()
        assert settings.NEARBY_RADIUS_MILES == 2.5
        assert settings.EVENT_SINK_URL == "http://sink.local"

    def test_database_url_wins_over_parts(self, monkeypatch):
        from app.db import session

        monkeypatch.setattr(session.settings, "DATABASE_URL", "sqlite:///stores.db")
        assert session.get_database_url() == "sqlite:///stores.db"

        monkeypatch.setattr(session.settings, "DATABASE_URL", None)
        monkeypatch.setattr(session.settings, "DB_HOST", "db.internal")
        assert session.get_database_url().startswith("postgresql+psycopg2://")
        assert "@db.internal:" in session.get_database_url()
