"""Configuration settings for the cron describer."""

from pydantic_settings import BaseSettings

from models import Options


class Settings(BaseSettings):
    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False

    # Description defaults for API and CLI requests
    throw_on_parse_error: bool = True
    verbose: bool = False
    use_24_hour_format: bool = True
    use_alternate_dow_dialect: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: str = ""

    class Config:
        env_prefix = "CRON_DESCRIBER_"
        env_file = ".env"
        env_file_encoding = "utf-8"

    def default_options(self) -> Options:
        """Build description options from the configured defaults."""
        return Options(
            throw_on_parse_error=self.throw_on_parse_error,
            verbose=self.verbose,
            use_24_hour_format=self.use_24_hour_format,
            use_alternate_dow_dialect=self.use_alternate_dow_dialect
        )


settings = Settings()
