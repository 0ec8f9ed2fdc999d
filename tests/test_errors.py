import pytest

from ebiscan.errors import (
    AnalysisTimeoutError,
    AnalysisUnavailableError,
    CommandNotFoundError,
    ConfigError,
    EbiError,
    ExecutionBlockedError,
    ExecutionFailedError,
    InvalidArgumentsError,
    InvalidResponseError,
    LlmClientError,
    NoInputError,
    ParseError,
    TokenLimitExceededError,
    UnknownLanguageError,
    UserInputTimeoutError,
    exit_code_for,
)


def test_fixed_messages():
    assert str(UnknownLanguageError()) == "Parse error: Cannot determine script language"
    assert str(NoInputError()) == "No input provided - empty stdin"
    assert str(TokenLimitExceededError()) == (
        "Script too large for analysis - token limit exceeded"
    )
    assert str(ExecutionBlockedError()) == (
        "Script execution blocked due to critical security risk"
    )
    assert str(UserInputTimeoutError()) == "Timeout waiting for user input"


def test_detail_is_kept_and_shown():
    err = ParseError("unexpected token")
    assert err.detail == "unexpected token"
    assert str(err).startswith("Parse error: Failed to parse script")
    assert str(err).endswith("unexpected token")


def test_timeout_error_carries_seconds():
    err = AnalysisTimeoutError(60)
    assert err.timeout == 60
    assert str(err).startswith("LLM analysis timeout after")
    assert "60" in str(err)


def test_command_not_found_carries_command():
    err = CommandNotFoundError("mystery")
    assert err.command == "mystery"
    assert str(err).startswith("Target command not found")
    assert str(err).endswith("mystery")


@pytest.mark.parametrize(
    "error, code",
    [
        (UnknownLanguageError(), 2),
        (ParseError("x"), 2),
        (NoInputError(), 4),
        (InvalidArgumentsError("x"), 5),
        (CommandNotFoundError("x"), 6),
        (ExecutionFailedError("x"), 7),
        (AnalysisTimeoutError(10), 3),
        (AnalysisUnavailableError("x"), 3),
        (LlmClientError("x"), 3),
        (ExecutionBlockedError(), 3),
        (TokenLimitExceededError(), 3),
        (UserInputTimeoutError(), 1),
        (InvalidResponseError("x"), 1),
        (ConfigError("x"), 1),
    ],
)
def test_exit_codes(error, code):
    assert exit_code_for(error) == code


def test_foreign_exception_exits_with_one():
    assert exit_code_for(ValueError("boom")) == 1


def test_all_errors_share_base():
    with pytest.raises(EbiError) as excinfo:
        raise LlmClientError("no key")
    assert str(excinfo.value).startswith("LLM client error")
    assert str(excinfo.value).endswith("no key")
    assert exit_code_for(excinfo.value) == 3