"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tsurch.search.render import DEFAULT_WIDTH, parse_width

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Config(BaseModel):
    """Runtime settings, keyed by environment variable name."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    columns: int = Field(default=DEFAULT_WIDTH, alias="COLUMNS")
    default_source: str = Field(default="ddg", alias="TSURCH_SOURCE")
    quote_get_terms: bool = Field(default=False, alias="TSURCH_QUOTE_TERMS")
    log_level: str = Field(default="WARNING", alias="TSURCH_LOG_LEVEL")

    @field_validator("columns", mode="before")
    @classmethod
    def _fallback_width(cls, value: object) -> int:
        return parse_width(value)

    @field_validator("default_source", mode="before")
    @classmethod
    def _strip_source(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or "ddg"
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {LOG_LEVELS}")
        return level
