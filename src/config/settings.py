"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use MDWEB_ prefix (e.g., MDWEB_TEXT_EXTENSION=.markdown).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use MDWEB_ prefix.

    Examples:
        MDWEB_TEXT_EXTENSION=.markdown
        MDWEB_ENCODING=latin-1
        MDWEB_DEFAULT_PATTERN=*.lit.md
        MDWEB_ANNOUNCE_OUTPUTS=false
    """

    model_config = SettingsConfigDict(
        env_prefix="MDWEB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Target naming
    text_extension: str = Field(
        default=".md",
        description="Extension appended to the extensionless document name to form the documentation target",
    )

    # I/O
    encoding: str = Field(
        default="utf-8",
        description="Encoding used to read documents and write targets",
    )

    default_pattern: str = Field(
        default="**/*.md",
        description="Glob (relative to inputdir) used when no --pattern is given",
    )

    # Reporting
    announce_outputs: bool = Field(
        default=True,
        description="Log each code/documentation target the first time it is opened",
    )

    @field_validator("text_extension")
    @classmethod
    def textExtension_normalize(cls, value: str) -> str:
        """Ensure a non-empty extension starts with a dot"""
        if value and not value.startswith("."):
            return "." + value
        return value


# Singleton instance - import this in your code
appsettings = AppSettings()
