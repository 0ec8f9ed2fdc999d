"""Error hierarchy and the process exit codes that go with it."""

from __future__ import annotations


class EbiError(Exception):
    """Base class for every error the tool reports."""

    exit_code: int = 1


class _FixedMessageError(EbiError):
    """An error whose message never varies."""

    message: str = ""

    def __init__(self) -> None:
        super().__init__(self.message)


class _DetailError(EbiError):
    """An error that carries a free-form detail after a fixed prefix."""

    prefix: str = ""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class UnknownLanguageError(_FixedMessageError):
    message = "Parse error: Cannot determine script language"
    exit_code = 2


class ParseError(_DetailError):
    prefix = "Parse error: Failed to parse script"
    exit_code = 2


class NoInputError(_FixedMessageError):
    message = "No input provided - empty stdin"
    exit_code = 4


class AnalysisUnavailableError(_DetailError):
    prefix = "LLM analysis failed"
    exit_code = 3


class AnalysisTimeoutError(EbiError):
    exit_code = 3

    def __init__(self, timeout: int) -> None:
        self.timeout = timeout
        super().__init__(f"LLM analysis timeout after {timeout} seconds")


class InvalidResponseError(_DetailError):
    prefix = "Invalid LLM response"


class TokenLimitExceededError(_FixedMessageError):
    message = "Script too large for analysis - token limit exceeded"
    exit_code = 3


class ExecutionBlockedError(_FixedMessageError):
    message = "Script execution blocked due to critical security risk"
    exit_code = 3


class CommandNotFoundError(EbiError):
    exit_code = 6

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Target command not found: {command}")


class ExecutionFailedError(_DetailError):
    prefix = "Target command execution failed"
    exit_code = 7


class LlmClientError(_DetailError):
    prefix = "LLM client error"
    exit_code = 3


class InvalidArgumentsError(_DetailError):
    prefix = "Invalid command line arguments"
    exit_code = 5


class UserInputTimeoutError(_FixedMessageError):
    message = "Timeout waiting for user input"


class ConfigError(_DetailError):
    prefix = "Configuration error"


def exit_code_for(error: BaseException) -> int:
    """Return the process exit code for an error that ended a run."""
    if isinstance(error, EbiError):
        return error.exit_code
    return 1