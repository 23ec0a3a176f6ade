"""Application configuration using pydantic-settings."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict


class OutputPaths(BaseModel):
    """Output locations for a partition run.

    Accepts both the camelCase option names (``acceptedPath``, ``rejectedPath``,
    ``jsonPath``) and the snake_case field names.
    """

    accepted_path: str
    rejected_path: str
    json_path: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Output streams
    ACCEPTED_PATH: str = "accepted-applications.csv"
    REJECTED_PATH: str = "rejected-applications.csv"
    JSON_PATH: str = "accepted-applications.json"

    # Eligibility rules
    ELIGIBLE_STATES: str = "IL,WA,NY,CO"
    MARKER_POLICY: str = "megasafe"

    # Keep the leading space left by the ", " delimiter in JSON keys/values
    PRESERVE_LEGACY_SPACING: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def eligible_states_set(self) -> frozenset[str]:
        """Parse eligible state codes from comma-separated string."""
        return frozenset(
            state.strip().upper()
            for state in self.ELIGIBLE_STATES.split(",")
            if state.strip()
        )

    @property
    def output_paths(self) -> OutputPaths:
        """Output locations configured for this process."""
        return OutputPaths(
            accepted_path=self.ACCEPTED_PATH,
            rejected_path=self.REJECTED_PATH,
            json_path=self.JSON_PATH,
        )


# Global settings instance
settings = Settings()
