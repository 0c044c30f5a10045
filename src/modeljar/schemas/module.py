"""
Pydantic schemas for the module being packaged.

ModuleIdentity is fixed once the name has been derived and the version bumped;
the descriptor and manifest contexts are what the fixed templates render.
"""

from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ModuleIdentity(BaseModel):
    """Name and (already incremented) version of the output module."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def name_is_canonical(cls, value: str) -> str:
        if "/" in value or "\\" in value:
            raise ValueError(f"module name must not contain path separators: {value!r}")
        return value


class MatchedEntry(BaseModel):
    """A source file that passed the model filters, with its full content."""
    model_config = ConfigDict(frozen=True)

    source_path: str
    content: bytes

    @property
    def base_name(self) -> str:
        return self.source_path.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]


class StagedModel(BaseModel):
    """A matched entry after it has been copied to the staging directory."""
    model_config = ConfigDict(frozen=True)

    source_path: str
    staged_path: Path

    @property
    def base_name(self) -> str:
        return self.staged_path.name


class DescriptorData(BaseModel):
    """Rendering context for module.properties and module-context.xml."""

    name: str
    version: str
    model_paths: List[str] = Field(default_factory=list)

    @field_validator("model_paths")
    @classmethod
    def sort_paths(cls, value: List[str]) -> List[str]:
        # Sorted for reproducible output
        return sorted(value)


class ManifestData(BaseModel):
    """Rendering context for META-INF/MANIFEST.MF."""

    name: str
    version: str
    built_by: str = ""
    manifest_version: str
    created_by: str
    build_jdk: str
    package: str


class RepackageResult(BaseModel):
    """Summary of a completed run, reported back to the CLI."""

    output_path: Path
    module: ModuleIdentity
    previous_version: str
    model_paths: List[str] = Field(default_factory=list)
    dropped: List[str] = Field(default_factory=list)

    @property
    def model_count(self) -> int:
        return len(self.model_paths)
