from __future__ import annotations

from dataclasses import dataclass, field

from .discovery import discover_icons
from .files import write_if_changed
from .manifest import generate_types, quote_name
from .models import IconEntry, SpriteConfig
from .sprite import generate_svg_sprite

LOG_PREFIX = "[build_icons]"


def log(message: str) -> None:
    print(f"{LOG_PREFIX} {message}", flush=True)


@dataclass(frozen=True)
class BuildResult:
    entries: list[IconEntry] = field(default_factory=list)
    sprite_written: bool = False
    types_written: bool = False

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]


def build_icons(config: SpriteConfig) -> BuildResult:
    input_dir = config.resolved_input_dir()
    sprite_path = config.resolved_sprite_path()
    types_path = config.resolved_types_path()
    input_label = config.relative_label(input_dir)

    entries = discover_icons(input_dir, extension=config.extension)
    if not entries:
        log(f"No {config.file_kind()} files found in {input_label}")
        return BuildResult()

    log(f"Generating sprite for {input_label} ({len(entries)} icons)")

    sprite = generate_svg_sprite(entries, input_dir, max_workers=config.max_workers)
    sprite_written = write_if_changed(sprite_path, sprite)
    log(f"{'Wrote' if sprite_written else 'Unchanged'} {config.relative_label(sprite_path)}")

    types = generate_types(
        [quote_name(entry.name) for entry in entries],
        generator_command=config.generator_command,
    )
    types_written = write_if_changed(types_path, types)
    log(f"{'Wrote' if types_written else 'Unchanged'} {config.relative_label(types_path)}")

    log(f"Generated {sprite_path.name} at {config.relative_label(sprite_path.parent)}")
    return BuildResult(entries=entries, sprite_written=sprite_written, types_written=types_written)
