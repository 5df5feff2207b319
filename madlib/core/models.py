"""Data models supporting the story generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from .constants import NO_WORD_FOUND


@dataclass(frozen=True)
class WordEntry:
    """A single ``{"word": ..., "type": ...}`` record read from the dictionary."""

    word: str
    type: str


@dataclass
class StoryConfig:
    """Paths and knobs for one story generation run."""

    dictionary_path: Path | str
    template_path: Path | str
    output_path: Path | str
    seed: Optional[int] = None
    placeholder: str = NO_WORD_FOUND


@dataclass
class StoryResult:
    output_path: Path
    lines_written: int
    tokens_replaced: int
    placeholders_used: int = 0
    missing_types: Tuple[str, ...] = field(default_factory=tuple)
    seed: Optional[int] = None
