from __future__ import annotations

import json
from typing import Iterable

from .models import DEFAULT_GENERATOR_COMMAND


def quote_name(name: str) -> str:
    return json.dumps(name, ensure_ascii=False)


def generate_types(names: Iterable[str], *, generator_command: str = DEFAULT_GENERATOR_COMMAND) -> str:
    """Render the ``IconName`` union from already-quoted string literals."""
    return "\n".join(
        [
            f"// This file is generated by {generator_command}",
            "",
            "export type IconName =",
            *[f"\t| {name}" for name in names],
            "",
        ]
    )
