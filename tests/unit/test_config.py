from ethbridge.config import Settings


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.event_signature == "AppEvent(uint256,bytes)"
        assert s.strict_narrowing is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ETHBRIDGE_STRICT_NARROWING", "true")
        assert Settings().strict_narrowing is True
