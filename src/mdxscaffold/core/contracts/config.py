"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from mdxscaffold.core.contracts.document import validate_path_entry
from mdxscaffold.core.contracts.exceptions import ManifestError

ProfileName = Literal["complete", "starter"]


class ScaffoldConfig(BaseModel):
    profile: ProfileName = "complete"
    paths: list[str] | None = None
    sections: dict[str, str] = Field(default_factory=dict)
    default_category: str | None = None
    extension: str = ".mdx"
    output_dir: Path = Path(".")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("paths")
    @classmethod
    def validate_paths(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        try:
            return [validate_path_entry(path) for path in value]
        except ManifestError as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2 or "/" in value:
            raise ValueError("extension must look like '.mdx'")
        return value
