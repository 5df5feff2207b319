"""Word dictionary loading and lookup."""

from __future__ import annotations

import json
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Sequence, Tuple

from ..core.constants import FILE_ENCODING, JSON_TYPE, JSON_WORD
from ..core.exceptions import DictionaryNotFoundError, DictionaryParseError
from ..core.models import WordEntry
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class _Record:
    """A JSON object with its key order preserved."""

    __slots__ = ("pairs",)

    def __init__(self, pairs: List[Tuple[str, Any]]) -> None:
        self.pairs = pairs


class WordDictionary:
    """Read-only mapping from word type to the words registered under it."""

    def __init__(self, words: Mapping[str, Iterable[str]]) -> None:
        self._words: Dict[str, Tuple[str, ...]] = {
            word_type: tuple(entries) for word_type, entries in words.items()
        }

    @classmethod
    def from_entries(cls, entries: Iterable[WordEntry]) -> "WordDictionary":
        grouped: Dict[str, List[str]] = defaultdict(list)
        for entry in entries:
            grouped[entry.type].append(entry.word)
        return cls(grouped)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get(self, word_type: str) -> Tuple[str, ...]:
        """Return the words for ``word_type`` in file order (empty if unknown)."""
        return self._words.get(word_type, ())

    def types(self) -> List[str]:
        return list(self._words)

    @property
    def word_count(self) -> int:
        return sum(len(words) for words in self._words.values())

    def as_dict(self) -> Dict[str, List[str]]:
        return {word_type: list(words) for word_type, words in self._words.items()}

    def __contains__(self, word_type: object) -> bool:
        return word_type in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordDictionary(types={len(self)}, words={self.word_count})"


def parse_records(items: Sequence[Any], source: Path | str = "<memory>") -> List[WordEntry]:
    """Turn decoded JSON array items into :class:`WordEntry` records.

    A ``word`` key must be immediately followed by a ``type`` key. Items that
    are not objects, or objects without a ``word`` key, are skipped.
    """

    entries: List[WordEntry] = []
    for index, item in enumerate(items):
        if not isinstance(item, _Record):
            LOGGER.debug("Skipping non-object item #%d in %s", index, source)
            continue
        keys = [key for key, _ in item.pairs]
        if JSON_WORD not in keys:
            LOGGER.debug("Skipping record #%d without a '%s' field", index, JSON_WORD)
            continue

        for position, (key, word) in enumerate(item.pairs):
            if key != JSON_WORD:
                continue
            following = item.pairs[position + 1] if position + 1 < len(item.pairs) else None
            if following is None or following[0] != JSON_TYPE:
                # every word should have a type
                raise DictionaryParseError(
                    source, f"No matching type for <{JSON_WORD}>.", location=f"record {index}"
                )
            word_type = following[1]
            if not isinstance(word, str) or not isinstance(word_type, str):
                raise DictionaryParseError(
                    source,
                    f"'{JSON_WORD}' and '{JSON_TYPE}' must be strings",
                    location=f"record {index}",
                )
            entries.append(WordEntry(word=word, type=word_type))
    return entries


def load_dictionary(path: Path | str) -> WordDictionary:
    """Load a JSON array of ``{"word", "type"}`` records into a dictionary."""

    source = Path(path)
    try:
        with source.open("r", encoding=FILE_ENCODING) as handle:
            document = json.load(handle, object_pairs_hook=_Record)
    except (FileNotFoundError, IsADirectoryError, PermissionError) as exc:
        raise DictionaryNotFoundError(source, exc.strerror or "") from exc
    except json.JSONDecodeError as exc:
        raise DictionaryParseError(
            source, exc.msg, location=f"line {exc.lineno}, column {exc.colno}"
        ) from exc
    except UnicodeDecodeError as exc:
        raise DictionaryParseError(source, f"invalid {FILE_ENCODING} text: {exc.reason}") from exc

    if not isinstance(document, list):
        raise DictionaryParseError(source, "expected a JSON array of word records")

    dictionary = WordDictionary.from_entries(parse_records(document, source))
    LOGGER.info(
        "Loaded %d words across %d types from %s", dictionary.word_count, len(dictionary), source
    )
    return dictionary


__all__ = ["WordDictionary", "load_dictionary", "parse_records"]
