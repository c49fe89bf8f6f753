"""Configuration schema using Pydantic."""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RenderConfig(BaseModel):
    """VALARM rendering options."""
    default_audio_attachment: str = Field(
        default="Basso",
        min_length=1,
        description="Sound reference used by audio alarms without an attachment",
    )


class LoggingConfig(BaseModel):
    """Logging options."""
    level: str = Field(default="INFO", pattern=r"^(?i:trace|debug|info|success|warning|error|critical)$")


class Config(BaseSettings):
    """Root configuration for icalarm."""
    model_config = SettingsConfigDict(env_prefix="ICALARM_", env_nested_delimiter="__")

    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
