from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RegistrySettings(BaseSettings):
    """Configuration for a ParameterTypeRegistry.

    Resolution order: programmatic, environment vars, defaults.
    """

    locale: str = Field(
        default="en", description="Locale used by the float and double converters"
    )
    seed_builtins: bool = Field(
        default=True, description="Register the built-in parameter types on creation"
    )
    max_generated_expressions: int = Field(
        default=256,
        ge=1,
        description="Upper bound on suggestions built for an ambiguous regexp",
    )

    model_config = SettingsConfigDict(env_prefix="PARAMETER_TYPES_")
