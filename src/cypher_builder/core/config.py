"""Configuration management."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CypherBuilderSettings(BaseSettings):
    # Rendering
    line_separator: str = Field(default="\n", description="Text placed between consecutive clauses")
    where_placeholder: str = Field(
        default="/* predicate translation not supported */",
        description="Text emitted by the where() stub in place of a translated predicate",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Level used by setup_logging()")
    log_colors: bool = Field(default=True, description="Colorize console log output")

    model_config = SettingsConfigDict(
        env_prefix="CYPHER_BUILDER_",
        env_file=".env",
        extra="ignore",  # Ignore extra fields in .env file
    )

    @field_validator("line_separator")
    @classmethod
    def _separator_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("line_separator must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.upper()


settings = CypherBuilderSettings()
