"""Shared constants for the mad-lib story generator."""

from __future__ import annotations

import re
from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit statuses reported by the CLI."""

    OK = 0
    PARAM_COUNT = 1
    FILE_NOT_FOUND = 2
    JSON_PARSE = 3
    OTHER = 10


# Field names in each dictionary record
JSON_WORD = "word"
JSON_TYPE = "type"

# Non-greedy: "[a] and [b]" yields two tokens, not one
TOKEN_RE = re.compile(r"\[(.*?)\]")

# Emitted when no words are registered for a requested type
NO_WORD_FOUND = "XXX"

FILE_ENCODING = "utf-8"
