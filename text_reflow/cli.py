"""Command-line interface for the text formatter.

WHY: Most reflow jobs are one-off: wrap a README to 72 columns, justify a
letter, number a list of clauses. The CLI exposes every formatter setting
as a flag so those jobs need no Python at all.

HOW: Uses argparse. Settings are layered: environment defaults
(config.py), then an optional JSON ``--config`` file, then explicit flags.
The merged dict is validated by FormatterConfig; validation errors are
reported on stderr with exit code 1. The selected mode runs on the input
file (or stdin) and the result goes to ``--output`` (or stdout).

RULES:
- Modes: paragraphs (default), format, center, expand, unexpand
- Status and errors go to stderr; formatted text goes to stdout or -o
- Exit codes: 0 = success, 1 = invalid settings or unreadable input
- ``--tags STYLE`` numbers every paragraph (number, alpha, roman, ...)
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from text_reflow.config import (
    ENV_BODY_INDENT,
    ENV_COLUMNS,
    ENV_FIRST_INDENT,
    ENV_TABSTOP,
    LOG_LEVEL,
)
from text_reflow.formatter import PARAGRAPH_SEPARATOR, TextFormatter
from text_reflow.models import FormatStyle, FormatterConfig
from text_reflow.tags import TAG_STYLES, make_tags

MODES = ("paragraphs", "format", "center", "expand", "unexpand")

# argparse dest -> FormatterConfig field, for flags that map one to one.
_FLAG_FIELDS = {
    "columns": "columns",
    "left_margin": "left_margin",
    "right_margin": "right_margin",
    "first_indent": "first_indent",
    "body_indent": "body_indent",
    "tabstop": "tabstop",
    "style": "format_style",
    "hard_margins": "hard_margins",
    "split_rules": "split_rules",
    "extra_space": "extra_space",
    "terminal_punctuation": "terminal_punctuation",
    "terminal_quotes": "terminal_quotes",
}


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separate from main() so tests can inspect the parser directly.
    """
    parser = argparse.ArgumentParser(
        prog="text_reflow",
        description="Reflow text into fixed-width lines with margins, "
                    "indentation, alignment and word splitting.",
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        default="-",
        help="File to format, or '-' for stdin (default: %(default)s).",
    )
    parser.add_argument("-o", "--output", default=None, help="Write the result here instead of stdout.")
    parser.add_argument(
        "--mode",
        choices=MODES,
        default="paragraphs",
        help="What to do with the input (default: %(default)s).",
    )
    parser.add_argument("--config", default=None, help="JSON file with FormatterConfig fields.")

    parser.add_argument("--columns", type=int, default=None, help="Total width (default: {}).".format(ENV_COLUMNS))
    parser.add_argument("--left-margin", type=int, default=None)
    parser.add_argument("--right-margin", type=int, default=None)
    parser.add_argument(
        "--first-indent",
        type=int,
        default=None,
        help="Indent of a paragraph's first line (default: {}).".format(ENV_FIRST_INDENT),
    )
    parser.add_argument(
        "--body-indent",
        type=int,
        default=None,
        help="Indent of the remaining lines (default: {}).".format(ENV_BODY_INDENT),
    )
    parser.add_argument("--tabstop", type=int, default=None, help="Spaces per tab (default: {}).".format(ENV_TABSTOP))
    parser.add_argument("--style", choices=[s.value for s in FormatStyle], default=None)
    parser.add_argument(
        "--hard-margins",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Split words that would cross the right margin.",
    )
    parser.add_argument(
        "--split-rules",
        type=int,
        default=None,
        help="Bitmask: 1=fixed, 2=continuation, 4=hyphenation (default: 1).",
    )
    parser.add_argument(
        "--extra-space",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Two spaces after sentence-ending words.",
    )
    parser.add_argument(
        "--abbreviation",
        action="append",
        default=None,
        help="Abbreviation (without period) never followed by two spaces. Repeatable.",
    )
    parser.add_argument("--terminal-punctuation", default=None)
    parser.add_argument("--terminal-quotes", default=None)
    parser.add_argument(
        "--nobreak-pair",
        nargs=2,
        action="append",
        metavar=("FIRST", "SECOND"),
        default=None,
        help="Regex pair that must not be split across lines. Repeatable; enables nobreak.",
    )
    parser.add_argument(
        "--tags",
        choices=sorted(TAG_STYLES),
        default=None,
        help="Number every paragraph with this label style.",
    )
    parser.add_argument(
        "--tag-template",
        default="{}.",
        help="Template for generated tags (default: %(default)s).",
    )
    parser.add_argument(
        "--tag",
        action="append",
        default=None,
        help="Explicit paragraph tag, one per paragraph. Repeatable.",
    )
    parser.add_argument("--show-splits", action="store_true", help="Report split words on stderr.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _load_config_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("{} must contain a JSON object".format(path))
    return data


def build_config(args: argparse.Namespace, text: str = "") -> FormatterConfig:
    """Merge env defaults, the config file and flags into a FormatterConfig.

    Raises:
        ValueError: If the config file is not a JSON object.
        pydantic.ValidationError: If any setting is invalid.
    """
    settings: Dict[str, Any] = {
        "columns": ENV_COLUMNS,
        "first_indent": ENV_FIRST_INDENT,
        "body_indent": ENV_BODY_INDENT,
        "tabstop": ENV_TABSTOP,
    }
    if args.config:
        settings.update(_load_config_file(args.config))

    for dest, field in _FLAG_FIELDS.items():
        value = getattr(args, dest)
        if value is not None:
            settings[field] = value

    if args.abbreviation:
        settings["abbreviations"] = list(settings.get("abbreviations", [])) + args.abbreviation
    if args.nobreak_pair:
        settings["nobreak"] = True
        settings["nobreak_pairs"] = [tuple(pair) for pair in args.nobreak_pair]

    if args.tag:
        settings["tag_paragraph"] = True
        settings["tag_text"] = list(args.tag)
    elif args.tags:
        count = len(re.split(PARAGRAPH_SEPARATOR, text)) if text else 1
        settings["tag_paragraph"] = True
        settings["tag_text"] = make_tags(args.tags, count, template=args.tag_template)

    return FormatterConfig.model_validate(settings)


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _write_output(path: Optional[str], content: str) -> None:
    if content and not content.endswith("\n"):
        content += "\n"
    if path:
        Path(path).write_text(content, encoding="utf-8")
    else:
        sys.stdout.write(content)


def run(args: argparse.Namespace) -> str:
    """Format the input described by ``args`` and return the result."""
    text = _read_input(args.input_file)
    formatter = TextFormatter(build_config(args, text))

    if args.mode == "format":
        result = formatter.format(text)
    elif args.mode == "center":
        result = formatter.center(text)
    elif args.mode == "expand":
        result = formatter.expand(text)
    elif args.mode == "unexpand":
        result = formatter.unexpand(text)
    else:
        result = formatter.paragraphs(text)

    if args.show_splits:
        for record in formatter.split_words:
            _status("split: {} -> {} | {}".format(record.word, record.first, record.rest or ""))
    return result


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m text_reflow``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    level = "DEBUG" if args.verbose else (LOG_LEVEL or "WARNING")
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        result = run(args)
    except ValidationError as e:
        _status("Error: invalid settings:\n{}".format(e))
        sys.exit(1)
    except (OSError, ValueError) as e:
        _status("Error: {}".format(e))
        sys.exit(1)

    _write_output(args.output, result)
    if args.output:
        _status("Wrote {} lines to {}".format(result.count("\n") + 1, args.output))


if __name__ == "__main__":
    main()
