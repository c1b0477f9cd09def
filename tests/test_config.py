"""Tests for ProblemSettings environment loading."""

from ddderr.config import ProblemSettings


class TestProblemSettings:
    def test_defaults(self, monkeypatch):
        for key in ("DDDERR_PROBLEM_TYPE", "DDDERR_INSTANCE_FROM_PATH", "DDDERR_LOG_SERVER_ERRORS"):
            monkeypatch.delenv(key, raising=False)

        settings = ProblemSettings(_env_file=None)
        assert settings.PROBLEM_TYPE == ""
        assert settings.INSTANCE_FROM_PATH is True
        assert settings.LOG_SERVER_ERRORS is True

    def test_loads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("DDDERR_PROBLEM_TYPE", "about:blank")
        monkeypatch.setenv("DDDERR_INSTANCE_FROM_PATH", "false")

        settings = ProblemSettings(_env_file=None)
        assert settings.PROBLEM_TYPE == "about:blank"
        assert settings.INSTANCE_FROM_PATH is False

    def test_ignores_unprefixed_env(self, monkeypatch):
        monkeypatch.delenv("DDDERR_PROBLEM_TYPE", raising=False)
        monkeypatch.setenv("PROBLEM_TYPE", "about:blank")

        assert ProblemSettings(_env_file=None).PROBLEM_TYPE == ""
