from pathlib import Path

from estoque.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ESTOQUE_API_BASE", raising=False)
        settings = Settings(_env_file=None)

        assert settings.api_base == "http://localhost:3333"
        assert settings.success_banner_seconds == 3.0
        assert settings.token_file.name == "storage.json"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ESTOQUE_API_BASE", "https://api.example.com")
        monkeypatch.setenv("ESTOQUE_TOKEN_FILE", str(tmp_path / "t.json"))
        monkeypatch.setenv("ESTOQUE_SUCCESS_BANNER_SECONDS", "5")

        settings = Settings(_env_file=None)

        assert settings.api_base == "https://api.example.com"
        assert settings.token_file == Path(tmp_path / "t.json")
        assert settings.success_banner_seconds == 5.0
