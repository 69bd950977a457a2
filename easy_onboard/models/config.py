from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal


DEFAULT_GUIDE_URL = (
    "https://raw.githubusercontent.com/automationpi/"
    "backstage-plugin-csvloader/main/onboarding.yml"
)


class SourceConfig(BaseModel):
    """Where the onboarding YAML lives and how hard to try fetching it."""
    url: str = Field(
        default=DEFAULT_GUIDE_URL,
        description="Raw URL of the onboarding YAML document"
    )
    timeout: float = Field(
        default=30.0,
        gt=0.0,
        description="Request timeout in seconds"
    )
    max_attempts: int = Field(
        default=3,
        ge=1,
        description="Total attempts for transient failures (network errors, 5xx)"
    )
    backoff_multiplier: float = Field(
        default=1.0,
        ge=0.0,
        description="Exponential backoff multiplier between attempts (0 disables waiting)"
    )
    backoff_max: float = Field(
        default=10.0,
        ge=0.0,
        description="Upper bound on a single backoff wait, in seconds"
    )


class RenderConfig(BaseModel):
    """Reference renderer configuration."""
    format: Literal["markdown", "html"] = Field(
        default="markdown",
        description="Output format of the rendered guide"
    )
    default_page_header: str = Field(
        default="Default Page Header",
        description="Shown when the document has no page_header"
    )
    default_page_title: str = Field(
        default="Default Page Title",
        description="Shown when the document has no page_title"
    )


class AppConfig(BaseSettings):
    """Root application configuration.

    Loads from environment variables with the ONBOARDING_ prefix.
    Example: ONBOARDING_SOURCE__URL for source.url
    """
    model_config = SettingsConfigDict(
        env_prefix="ONBOARDING_",
        env_nested_delimiter="__",
    )

    source: SourceConfig = Field(default_factory=SourceConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    debug: bool = Field(
        default=False,
        description="Enable verbose logging"
    )
