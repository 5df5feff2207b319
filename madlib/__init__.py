"""Mad-lib story generator.

This package exposes the public API surface via:

- ``madlib.data.dictionary.load_dictionary``: reads typed words from JSON.
- ``madlib.engine.substitution.TokenSubstituter``: replaces ``[type]`` tokens.
- ``madlib.engine.generator.StoryGenerator``: runs the file-to-file pipeline.
"""

from .core.models import StoryConfig, StoryResult
from .data.dictionary import WordDictionary, load_dictionary
from .engine.generator import StoryGenerator
from .engine.substitution import TokenSubstituter

__all__ = [
    "StoryConfig",
    "StoryGenerator",
    "StoryResult",
    "TokenSubstituter",
    "WordDictionary",
    "load_dictionary",
]

__version__ = "1.0.0"
