"""Build-time SVG sprite and IconName type generation."""

from .build import BuildResult, build_icons
from .discovery import discover_icons
from .files import write_if_changed
from .manifest import generate_types
from .models import IconEntry, SpriteConfig
from .sprite import IconParseError, MissingRootElementError, SpriteBuildError, generate_svg_sprite

__all__ = [
    "BuildResult",
    "IconEntry",
    "IconParseError",
    "MissingRootElementError",
    "SpriteBuildError",
    "SpriteConfig",
    "build_icons",
    "discover_icons",
    "generate_svg_sprite",
    "generate_types",
    "write_if_changed",
]
