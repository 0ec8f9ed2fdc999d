"""Command-line options for the script analysis tool."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass, field
from typing import NoReturn, Sequence

from .errors import InvalidArgumentsError, UnknownLanguageError
from .locale import (
    OutputLanguage,
    detect_system_locale,
    get_system_locale_info,
)

_VERSION = "0.1.0"
_DEFAULT_MODEL = "gpt-5-mini"
_DEFAULT_TIMEOUT = 300
_MIN_TIMEOUT = 10
_MAX_TIMEOUT = 300
_TIMEOUT_RANGE_MESSAGE = "Timeout must be between 10 and 300 seconds"
_SCRIPT_LANGUAGES = frozenset({"bash", "python"})


def _is_unsigned_integer(text: str) -> bool:
    return text.isascii() and text.isdigit()


def _timeout_in_range(value: int) -> bool:
    return _MIN_TIMEOUT <= value <= _MAX_TIMEOUT


def _parse_timeout(text: str) -> int:
    if not _is_unsigned_integer(text):
        raise argparse.ArgumentTypeError("Timeout must be a number")
    value = int(text)
    if not _timeout_in_range(value):
        raise argparse.ArgumentTypeError(_TIMEOUT_RANGE_MESSAGE)
    return value


class _RaisingParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting on bad input."""

    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentsError(message)


@dataclass
class CliOptions:
    """Options given on the command line, with environment overrides."""

    command_and_args: list[str] = field(default_factory=list)
    lang: str | None = None
    model: str = _DEFAULT_MODEL
    timeout: int = _DEFAULT_TIMEOUT
    verbose: bool = False
    debug: bool = False
    output_lang: str | None = None

    def validate(self) -> None:
        """Raise an EbiError if the options cannot be used."""
        if not _timeout_in_range(self.timeout):
            raise InvalidArgumentsError(_TIMEOUT_RANGE_MESSAGE)
        if not self.command_and_args:
            raise InvalidArgumentsError("Target command is required")
        if self.lang is not None and self.lang.strip().lower() not in _SCRIPT_LANGUAGES:
            raise UnknownLanguageError()
        self.output_language()

    def target_command(self) -> str:
        return self.command_and_args[0]

    def target_args(self) -> list[str]:
        return list(self.command_and_args[1:])

    def llm_model(self) -> str:
        return self.model

    def timeout_seconds(self) -> int:
        """Return the analysis timeout, honouring EBI_DEFAULT_TIMEOUT if valid."""
        override = os.environ.get("EBI_DEFAULT_TIMEOUT")
        if override is not None and _is_unsigned_integer(override):
            value = int(override)
            if _timeout_in_range(value):
                return value
        return self.timeout

    def is_verbose(self) -> bool:
        return self.verbose or self.debug

    def is_debug(self) -> bool:
        return self.debug

    def should_use_color(self) -> bool:
        return "NO_COLOR" not in os.environ

    def output_language(self) -> OutputLanguage:
        """Resolve the report language: environment, then option, then locale."""
        env_lang = os.environ.get("EBI_OUTPUT_LANGUAGE")
        if env_lang is not None:
            return OutputLanguage.parse(env_lang)
        if self.output_lang is not None:
            return OutputLanguage.parse(self.output_lang)
        return detect_system_locale()

    def language_debug_info(self) -> str:
        """Describe how the output language was chosen."""
        lines = [
            f"EBI_OUTPUT_LANGUAGE={os.environ.get('EBI_OUTPUT_LANGUAGE', '(not set)')}",
            f"CLI --output-lang={self.output_lang or 'english (default)'}",
            f"System locale: {get_system_locale_info()}",
        ]
        try:
            lines.append(f"Detected language: {self.output_language().value}")
        except InvalidArgumentsError as exc:
            lines.append(f"Language detection error: {exc}")
        return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``ebi`` command."""
    parser = _RaisingParser(
        prog="ebi",
        description="Evaluate Before Invocation - Script analysis tool using LLMs",
        allow_abbrev=False,
    )
    parser.add_argument("-l", "--lang", help="Override automatic language detection")
    parser.add_argument(
        "-m", "--model", default=_DEFAULT_MODEL, help="LLM model to use for analysis"
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=_parse_timeout,
        default=_DEFAULT_TIMEOUT,
        help="Maximum time for LLM analysis in seconds (10-300)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output to stderr"
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug output including LLM communications",
    )
    parser.add_argument(
        "--output-lang",
        dest="output_lang",
        help="Output language for analysis reports (english, japanese); "
        "detected from the system locale if not given",
    )
    parser.add_argument("-V", "--version", action="version", version=f"ebi {_VERSION}")
    parser.add_argument(
        "command_and_args",
        nargs=argparse.REMAINDER,
        metavar="COMMAND [ARGS...]",
        help="Target command and its arguments",
    )
    return parser


def _parse_without_validation(argv: Sequence[str] | None) -> CliOptions:
    namespace = build_parser().parse_args(argv)
    if not namespace.command_and_args:
        raise InvalidArgumentsError("the target command is required")
    return CliOptions(
        command_and_args=list(namespace.command_and_args),
        lang=namespace.lang,
        model=namespace.model,
        timeout=namespace.timeout,
        verbose=namespace.verbose,
        debug=namespace.debug,
        output_lang=namespace.output_lang,
    )


def parse_args(argv: Sequence[str] | None = None) -> CliOptions:
    """Parse and validate command-line arguments (``sys.argv[1:]`` by default)."""
    options = _parse_without_validation(argv)
    options.validate()
    return options