"""ProblemSettings -- configuration for rendering problem responses.

All values are read via pydantic-settings from ``DDDERR_``-prefixed
environment variables (or a local .env file). Every field has a default,
so the library works unconfigured.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ProblemSettings(BaseSettings):
    """Problem rendering settings, loaded from environment variables."""

    model_config = SettingsConfigDict(env_prefix="DDDERR_", env_file=".env", extra="ignore")

    # Problem "type" for every response; empty falls back to the HTTP reason phrase
    PROBLEM_TYPE: str = ""

    # Use the request path as the problem "instance"
    INSTANCE_FROM_PATH: bool = True

    # Log 5xx problems together with their parent cause
    LOG_SERVER_ERRORS: bool = True


settings = ProblemSettings()
