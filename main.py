"""CLI entrypoint for the mad-lib story generator."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Mapping, Optional, Sequence

from madlib.core.constants import ExitCode
from madlib.core.exceptions import MadLibError, UsageError
from madlib.core.models import StoryConfig
from madlib.engine.generator import StoryGenerator
from madlib.utils.logger import configure_logging, get_logger, parse_level

LOGGER = get_logger("madlib.cli")

LOG_LEVEL_ENV = "MADLIB_LOG_LEVEL"
SEED_ENV = "MADLIB_SEED"
PATH_ARG_COUNT = 3


class _StrictArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting with argparse's own status."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(f"Invalid parameter count. {message}")


def build_parser() -> argparse.ArgumentParser:
    parser = _StrictArgumentParser(
        prog="madlib",
        description="Fill [type] tokens in a story template with random words from a JSON dictionary",
        add_help=False,
    )
    parser.add_argument("dictionary", type=Path, help="JSON array of {word, type} records")
    parser.add_argument("template", type=Path, help="Story template with [type] tokens")
    parser.add_argument("output", type=Path, help="Where to write the generated story")
    return parser


def parse_paths(argv: Sequence[str]) -> argparse.Namespace:
    """Parse exactly three raw paths; paths starting with '-' stay positional."""

    if len(argv) != PATH_ARG_COUNT:
        raise UsageError(f"Invalid parameter count. Expected {PATH_ARG_COUNT}, got {len(argv)}.")
    return build_parser().parse_args(["--", *argv])


def seed_from_env(environ: Mapping[str, str]) -> Optional[int]:
    raw = environ.get(SEED_ENV, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        LOGGER.warning("Ignoring non-integer %s=%r", SEED_ENV, raw)
        return None


def main(argv: list[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    environ = os.environ if environ is None else environ
    configure_logging(parse_level(environ.get(LOG_LEVEL_ENV)))

    try:
        args = parse_paths(sys.argv[1:] if argv is None else argv)
        config = StoryConfig(
            dictionary_path=args.dictionary,
            template_path=args.template,
            output_path=args.output,
            seed=seed_from_env(environ),
        )
        result = StoryGenerator(config).generate()
    except MadLibError as exc:
        print(exc, file=sys.stderr)
        return int(exc.exit_code)
    except Exception as exc:
        LOGGER.debug("Unexpected failure", exc_info=True)
        print(f"Generic error: {exc}", file=sys.stderr)
        return int(ExitCode.OTHER)

    if result.missing_types:
        LOGGER.info("Types without words: %s", ", ".join(result.missing_types))
    print(f"Output file: {result.output_path}")
    return int(ExitCode.OK)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
