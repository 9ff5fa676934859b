"""
Charset Builder
================

Derives the effective alphabet from a :class:`GenerationConfig`: the
selected class sets concatenated in canonical order, optionally with the
visually similar characters removed.
"""

from __future__ import annotations

from passforge.core.models import (
    SIMILAR_CHARACTERS,
    CharacterClass,
    GenerationConfig,
)


def class_charset(character_class: CharacterClass, exclude_similar: bool) -> str:
    """Return one class's characters, filtered by the similar-character rule."""
    chars = character_class.characters
    if exclude_similar:
        return "".join(ch for ch in chars if ch not in SIMILAR_CHARACTERS)
    return chars


def build_charset(config: GenerationConfig) -> str:
    """Build the alphabet for *config*.

    Duplicates across classes are kept. The result is empty when no class
    is selected or filtering removed every character.
    """
    return "".join(
        class_charset(c, config.exclude_similar) for c in config.ordered_classes
    )
