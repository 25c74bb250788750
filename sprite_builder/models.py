from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_INPUT_DIR = Path("src") / "assets" / "icons"
DEFAULT_SPRITE_PATH = Path("public") / "sprite.svg"
DEFAULT_TYPES_PATH = Path("src") / "lib" / "names.ts"
DEFAULT_EXTENSION = ".svg"
DEFAULT_GENERATOR_COMMAND = "pnpm run build:icons"


class SpriteConfig(BaseModel):
    """Where icons are read from and where the generated files go."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: Path = Field(default_factory=Path.cwd)
    input_dir: Path = DEFAULT_INPUT_DIR
    sprite_path: Path = DEFAULT_SPRITE_PATH
    types_path: Path = DEFAULT_TYPES_PATH
    extension: str = DEFAULT_EXTENSION
    generator_command: str = Field(default=DEFAULT_GENERATOR_COMMAND, min_length=1)
    max_workers: int | None = Field(default=None, ge=1)

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(".") or len(value) < 2:
            raise ValueError("extension must look like '.svg'")
        if "/" in value or os.sep in value:
            raise ValueError("extension must not contain path separators")
        return value

    def _resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self.root / path

    def resolved_input_dir(self) -> Path:
        return self._resolve(self.input_dir)

    def resolved_sprite_path(self) -> Path:
        return self._resolve(self.sprite_path)

    def resolved_types_path(self) -> Path:
        return self._resolve(self.types_path)

    def relative_label(self, path: Path) -> str:
        # Only used for log lines.
        try:
            return os.path.relpath(path, self.root)
        except ValueError:
            return str(path)

    def file_kind(self) -> str:
        return self.extension.lstrip(".").upper()


@dataclass(frozen=True)
class IconEntry:
    relative_path: str
    name: str

    @classmethod
    def from_relative_path(cls, relative_path: str, *, extension: str) -> "IconEntry":
        name = relative_path[: -len(extension)] if relative_path.endswith(extension) else relative_path
        return cls(relative_path=relative_path, name=name)

    def source_path(self, input_dir: Path) -> Path:
        return input_dir.joinpath(*self.relative_path.split("/"))
