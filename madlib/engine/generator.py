"""Story generation orchestration.

Three sequential steps:
  1. Load the word dictionary (fully, before any other file is opened).
  2. Stream the template line by line through :class:`TokenSubstituter`.
  3. Write every substituted line to the output file.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import IO, Optional

from ..core.constants import FILE_ENCODING
from ..core.exceptions import StoryFileNotFoundError
from ..core.models import StoryConfig, StoryResult
from ..data.dictionary import WordDictionary, load_dictionary
from ..utils.logger import get_logger
from .substitution import TokenSubstituter

LOGGER = get_logger(__name__)


def _open(path: Path, mode: str) -> IO[str]:
    try:
        return path.open(mode, encoding=FILE_ENCODING)
    except (FileNotFoundError, IsADirectoryError, PermissionError) as exc:
        raise StoryFileNotFoundError(path, exc.strerror or "") from exc


class StoryGenerator:
    """Create a story by replacing template tokens with dictionary words."""

    def __init__(
        self,
        config: StoryConfig,
        dictionary: Optional[WordDictionary] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config
        self.dictionary = dictionary
        self.rng = rng

    @property
    def dictionary_path(self) -> Path:
        return Path(self.config.dictionary_path)

    @property
    def template_path(self) -> Path:
        return Path(self.config.template_path)

    @property
    def output_path(self) -> Path:
        return Path(self.config.output_path)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self) -> StoryResult:
        if self.dictionary is None:
            self.dictionary = load_dictionary(self.dictionary_path)

        substituter = TokenSubstituter(
            self.dictionary,
            rng=self.rng,
            seed=self.config.seed,
            placeholder=self.config.placeholder,
        )

        LOGGER.info("Writing story from %s to %s", self.template_path, self.output_path)
        lines_written = 0
        # Template must open before the output file is created
        with _open(self.template_path, "r") as reader:
            with _open(self.output_path, "w") as writer:
                for line in substituter.substitute_lines(reader):
                    writer.write(line)
                    writer.write("\n")
                    lines_written += 1

        LOGGER.info(
            "Story complete: %d lines, %d tokens replaced (%d placeholders)",
            lines_written,
            substituter.tokens_replaced,
            substituter.placeholders_used,
        )
        return StoryResult(
            output_path=self.output_path,
            lines_written=lines_written,
            tokens_replaced=substituter.tokens_replaced,
            placeholders_used=substituter.placeholders_used,
            missing_types=tuple(sorted(substituter.missing_types)),
            seed=self.config.seed,
        )
