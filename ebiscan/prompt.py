"""Interactive confirmation before running an analysed script."""

from __future__ import annotations

import os
import queue
import sys
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from .errors import EbiError, UserInputTimeoutError
from .locale import (
    ExecutionRecommendation,
    OutputLanguage,
    RiskLevel,
    get_critical_warning,
    get_prompt_message,
    get_prompt_text,
)

_RESET = "\x1b[0m"
_PROCEED_WORDS = frozenset({"yes", "y", "execute", "proceed"})
_DECLINE_WORDS = frozenset({"no", "n", "cancel", "abort", "stop"})
_REVIEW_WORDS = frozenset({"review", "details", "show", "more"})

Reader = Callable[[], Optional[str]]


@dataclass(frozen=True)
class ExecutionDecision:
    """Whether the user chose to run the script."""

    proceed: bool

    @classmethod
    def approve(cls) -> "ExecutionDecision":
        return cls(proceed=True)

    @classmethod
    def decline(cls) -> "ExecutionDecision":
        return cls(proceed=False)


class _ReadFailed(Exception):
    """Raised inside the reader when the terminal could not be read."""


def _read_terminal(warn_on_missing_tty: bool) -> str:
    """Read one response from stdin, or from /dev/tty when stdin is piped."""
    if sys.stdin is not None and sys.stdin.isatty():
        try:
            line = sys.stdin.readline()
        except OSError as exc:
            raise _ReadFailed() from exc
        return line if line else "no"

    try:
        fd = os.open("/dev/tty", os.O_RDONLY)
    except OSError:
        if warn_on_missing_tty:
            print(
                "⚠️  Cannot read user input (stdin is piped). "
                "Defaulting to decline for safety.",
                file=sys.stderr,
            )
        return "no"
    try:
        data = os.read(fd, 256)
    except OSError as exc:
        raise _ReadFailed() from exc
    finally:
        os.close(fd)
    if not data:
        return "no"
    return data.decode("utf-8", errors="replace")


@dataclass
class UserPrompter:
    """Asks the user whether to execute a script, with an optional timeout.

    ``reader`` replaces terminal input: it returns one line, or None at end
    of input.
    """

    timeout: float | None
    use_colors: bool
    output_language: OutputLanguage
    reader: Reader | None = None

    def prompt_execution_decision(
        self,
        risk: RiskLevel,
        recommendation: ExecutionRecommendation | str,
    ) -> ExecutionDecision:
        """Show the risk prompt and return the user's decision."""
        self._display_execution_prompt(risk, recommendation)
        return self.parse_execution_response(self._get_user_input())

    def _display_execution_prompt(
        self, risk: RiskLevel, recommendation: ExecutionRecommendation | str
    ) -> None:
        if self.use_colors:
            if risk in (RiskLevel.CRITICAL, RiskLevel.HIGH):
                color_start = "\x1b[1m\x1b[33m"
            elif risk is RiskLevel.MEDIUM:
                color_start = "\x1b[1m\x1b[35m"
            else:
                color_start = "\x1b[1m\x1b[36m"
            color_end = _RESET
        else:
            color_start = color_end = ""

        message = get_prompt_message(risk, self.output_language)
        print(f"\n{color_start}{message}{color_end}\n\n", end="")

        if isinstance(recommendation, ExecutionRecommendation):
            recommendation_text = recommendation.description
        else:
            recommendation_text = recommendation
        print(recommendation_text)
        print()

        if risk is RiskLevel.CRITICAL:
            print(get_critical_warning(self.output_language))
            print()

        print(get_prompt_text(risk, self.output_language), end="")
        try:
            sys.stdout.flush()
        except OSError:
            raise UserInputTimeoutError() from None

    def _read_once(self, warn_on_missing_tty: bool) -> str:
        if self.reader is not None:
            try:
                line = self.reader()
            except OSError as exc:
                raise _ReadFailed() from exc
            return "no" if line is None else line
        return _read_terminal(warn_on_missing_tty)

    def _get_user_input(self) -> str:
        if self.timeout is None:
            try:
                return self._read_once(True).strip().lower()
            except _ReadFailed:
                raise UserInputTimeoutError() from None
        return self._get_user_input_with_timeout(self.timeout)

    def _get_user_input_with_timeout(self, timeout: float) -> str:
        results: queue.Queue[str | None] = queue.Queue(maxsize=1)

        def worker() -> None:
            try:
                results.put(self._read_once(False).strip().lower())
            except _ReadFailed:
                results.put(None)

        threading.Thread(target=worker, daemon=True).start()
        try:
            response = results.get(timeout=timeout)
        except queue.Empty:
            print("\n🦐⏰ Input timeout reached. Defaulting to decline for safety.")
            raise UserInputTimeoutError() from None
        if response is None:
            raise UserInputTimeoutError()
        return response

    def parse_execution_response(self, response: str) -> ExecutionDecision:
        """Interpret a response, asking again until it is recognised."""
        while True:
            if response in _PROCEED_WORDS:
                return ExecutionDecision.approve()
            if response in _DECLINE_WORDS:
                return ExecutionDecision.decline()
            if response in _REVIEW_WORDS:
                print(
                    "🦐💡 Review functionality not yet implemented. "
                    "Defaulting to decline for safety."
                )
                return ExecutionDecision.decline()
            if response == "":
                return ExecutionDecision.decline()
            print(
                "🦐❓ Please enter 'yes' to execute, 'no' to cancel, "
                "or 'review' for details."
            )
            print("Your choice: ", end="", flush=True)
            response = self._get_user_input()

    def prompt_confirmation(self, message: str) -> bool:
        """Ask a yes/no question; only 'yes' or 'y' count as yes."""
        print(f"{message} (y/n): ", end="")
        try:
            sys.stdout.flush()
        except OSError:
            raise UserInputTimeoutError() from None
        return self._get_user_input() in ("yes", "y")

    def display_message(self, message: str) -> None:
        print(message)

    def display_progress(self, message: str) -> None:
        if self.use_colors:
            print(f"\x1b[36m{message}{_RESET}", end="", flush=True)
        else:
            print(message, end="", flush=True)

    def display_error(self, error: EbiError) -> None:
        if self.use_colors:
            color_start, color_end = "\x1b[1m\x1b[31m", _RESET
        else:
            color_start = color_end = ""
        print(f"{color_start}🚨 Error: {error}{color_end}", file=sys.stderr)

    def clear_line(self) -> None:
        if self.use_colors:
            print("\r\x1b[K", end="", flush=True)

    def display_step(self, step_num: int, total_steps: int, message: str) -> None:
        if self.use_colors:
            color_start, color_end = "\x1b[1m\x1b[34m", _RESET
        else:
            color_start = color_end = ""
        print(
            f"{color_start}[{step_num}/{total_steps}]{color_end} {message}",
            file=sys.stderr,
        )

    def display_spinner_start(self, message: str) -> None:
        if self.use_colors:
            print(f"\x1b[33m⏳ {message}{_RESET}", end="", file=sys.stderr, flush=True)
        else:
            print(f"⏳ {message}", end="", file=sys.stderr, flush=True)

    def display_spinner_end(self, success: bool) -> None:
        if success:
            text = " \x1b[32m✓\x1b[0m" if self.use_colors else " ✓"
        else:
            text = " \x1b[31m✗\x1b[0m" if self.use_colors else " ✗"
        print(text, file=sys.stderr)

    @classmethod
    def for_cli(cls, options) -> "UserPrompter":
        """Build a prompter from command-line options and the environment."""
        output_language = options.output_language()
        if options.is_debug():
            return cls(None, options.should_use_color(), output_language)

        prompt_timeout: int | None = None
        env_value = os.environ.get("EBI_PROMPT_TIMEOUT")
        if env_value is not None and env_value.isascii() and env_value.isdigit():
            prompt_timeout = min(max(int(env_value), 10), 900)
        if prompt_timeout is None:
            prompt_timeout = min(options.timeout_seconds(), 300)

        return cls(prompt_timeout, options.should_use_color(), output_language)

    @classmethod
    def for_testing(cls) -> "UserPrompter":
        return cls(1, False, OutputLanguage.ENGLISH)

    @classmethod
    def without_timeout(cls) -> "UserPrompter":
        return cls(None, True, OutputLanguage.ENGLISH)