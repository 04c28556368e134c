"""Configuration errors raised while assembling the data source."""


class ConfigurationError(Exception):
    """Base exception for data source configuration problems."""


class MissingConfigurationError(ConfigurationError):
    """A required environment variable is absent or empty."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing required environment variables: {', '.join(missing)}")
