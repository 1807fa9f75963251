import pytest

from utilkit.config import DEFAULT_USER_AGENT, Settings


def test_default_settings() -> None:
    s = Settings(_env_file=None)  # type: ignore[call-arg]
    assert s.log_level == "INFO"
    assert s.http_timeout == 10.0
    assert s.http_user_agent == DEFAULT_USER_AGENT
    assert s.hash_chunk_size == 65536
    assert s.ics_timezone == "America/Los_Angeles"


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UTILKIT_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("UTILKIT_LOG_LEVEL", "debug")
    s = Settings(_env_file=None)  # type: ignore[call-arg]
    assert s.http_timeout == 2.5
    assert s.log_level == "debug"
