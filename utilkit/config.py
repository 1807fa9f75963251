from pydantic_settings import BaseSettings

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/70.0.3538.77 Safari/537.36"
)


class Settings(BaseSettings):
    """Library-wide settings, overridable via ``UTILKIT_*`` environment variables."""

    log_level: str = "INFO"

    http_timeout: float = 10.0
    http_user_agent: str = DEFAULT_USER_AGENT

    hash_chunk_size: int = 65536

    ics_timezone: str = "America/Los_Angeles"

    model_config = {"env_prefix": "UTILKIT_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
