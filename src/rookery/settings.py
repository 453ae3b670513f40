"""User-configurable settings for the game layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameSettings:
    """All user-configurable settings."""

    # Rendering
    use_unicode_glyphs: bool = True
    empty_square: str = "."

    # Persistence
    save_suffix: str = ".json"
    snapshot_indent: int | None = 2
