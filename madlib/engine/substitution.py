"""Bracketed token replacement over template lines."""

from __future__ import annotations

import random
import re
from typing import Iterable, Iterator, Optional, Set

from ..core.constants import NO_WORD_FOUND, TOKEN_RE
from ..data.dictionary import WordDictionary
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


def strip_line_terminator(line: str) -> str:
    """Drop a single trailing ``\\n``, ``\\r\\n`` or ``\\r``."""

    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


class TokenSubstituter:
    """Replace ``[type]`` tokens with random words of that type.

    A single RNG is owned for the lifetime of the substituter. Pass either an
    ``rng`` or a ``seed`` to make output reproducible.
    """

    def __init__(
        self,
        dictionary: WordDictionary,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        placeholder: str = NO_WORD_FOUND,
    ) -> None:
        self.dictionary = dictionary
        self.rng = rng or random.Random(seed)
        self.placeholder = placeholder
        self.tokens_replaced = 0
        self.placeholders_used = 0
        self.missing_types: Set[str] = set()

    def choose(self, word_type: str) -> str:
        """Return a random word registered under ``word_type``."""
        words = self.dictionary.get(word_type)
        if not words:
            if word_type not in self.missing_types:
                LOGGER.warning("No words of type '%s'; using '%s'", word_type, self.placeholder)
                self.missing_types.add(word_type)
            self.placeholders_used += 1
            return self.placeholder
        return words[self.rng.randrange(len(words))]

    def substitute_line(self, line: str) -> str:
        """Replace every token in ``line``; each token draws independently."""

        def _replace(match: re.Match[str]) -> str:
            self.tokens_replaced += 1
            return self.choose(match.group(1))

        return TOKEN_RE.sub(_replace, line)

    def substitute_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """Lazily substitute ``lines``, yielding each without its terminator."""
        for line in lines:
            yield self.substitute_line(strip_line_terminator(line))
