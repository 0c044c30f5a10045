# modeljar/src/modeljar/core/config.py

import os
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from modeljar.core.settings import DEFAULT_OUTPUT, DEFAULT_VERSION, SNIFF_BYTES
from modeljar.exceptions import ConfigurationError


class Settings(BaseSettings):
    # Output JAR written when no --output is given
    default_output: str = Field(default=DEFAULT_OUTPUT)
    # Identity recorded as Built-By in the manifest
    built_by: Optional[str] = Field(default=None)
    sniff_bytes: int = Field(default=SNIFF_BYTES, gt=0)
    default_version: str = Field(default=DEFAULT_VERSION, min_length=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MODELJAR_",
        extra="ignore",
    )

    def resolve_built_by(self) -> str:
        """
        Identity for the manifest: explicit setting first, then $USER, else empty.
        """
        if self.built_by is not None:
            return self.built_by
        return os.environ.get("USER", "")


def get_settings(**overrides) -> Settings:
    """Build settings from the environment, with keyword overrides taking precedence."""
    values = {k: v for k, v in overrides.items() if v is not None}
    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid modeljar settings: {e}") from e
