"""Execution settings and running the approved script through its interpreter."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field, replace
from pathlib import Path

from .errors import (
    CommandNotFoundError,
    ExecutionBlockedError,
    ExecutionFailedError,
    InvalidArgumentsError,
)


@dataclass
class ExecutionConfig:
    """The target command, its arguments and the script fed to its stdin."""

    target_command: str
    target_args: list[str]
    script_content: str
    working_dir: Path | None = None
    env_vars: dict[str, str] = field(default_factory=dict)
    timeout_seconds: int | None = None
    sandbox_mode: bool = False

    def with_working_dir(self, directory: str | os.PathLike[str]) -> "ExecutionConfig":
        return replace(self, working_dir=Path(directory))

    def with_env_var(self, key: str, value: str) -> "ExecutionConfig":
        return replace(self, env_vars={**self.env_vars, key: value})

    def with_timeout(self, seconds: int) -> "ExecutionConfig":
        return replace(self, timeout_seconds=seconds)

    def with_sandbox(self) -> "ExecutionConfig":
        return replace(self, sandbox_mode=True)

    def full_command(self) -> str:
        """Render the command line, quoting arguments that contain spaces."""
        parts = [self.target_command]
        parts.extend(f'"{arg}"' if " " in arg else arg for arg in self.target_args)
        return " ".join(parts)

    def validate(self) -> None:
        """Raise ValueError if the configuration cannot be run."""
        if not self.target_command:
            raise ValueError("Target command cannot be empty")
        if not self.script_content:
            raise ValueError("Script content cannot be empty")
        if self.timeout_seconds is not None and self.timeout_seconds == 0:
            raise ValueError("Timeout must be greater than 0")


@dataclass
class SandboxConfig:
    """Resource and access limits for sandboxed execution."""

    allow_network: bool = False
    allow_filesystem_read: list[Path] = field(default_factory=lambda: [Path("/tmp")])
    allow_filesystem_write: list[Path] = field(default_factory=lambda: [Path("/tmp")])
    max_memory_mb: int | None = 512
    max_cpu_percent: int | None = 50
    allowed_commands: list[str] = field(default_factory=list)

    @classmethod
    def permissive(cls) -> "SandboxConfig":
        return cls(
            allow_network=True,
            allow_filesystem_read=[],
            allow_filesystem_write=[],
            max_memory_mb=None,
            max_cpu_percent=None,
            allowed_commands=[],
        )

    @classmethod
    def restrictive(cls) -> "SandboxConfig":
        return cls(
            allow_network=False,
            allow_filesystem_read=[],
            allow_filesystem_write=[],
            max_memory_mb=128,
            max_cpu_percent=25,
            allowed_commands=["echo", "cat", "ls", "pwd"],
        )


@dataclass(frozen=True)
class ScriptRunner:
    """Runs the target command with the script piped to its standard input."""

    config: ExecutionConfig
    timeout_seconds: int | None = None

    def with_timeout(self, seconds: int) -> "ScriptRunner":
        return replace(self, timeout_seconds=seconds)

    def execute(self, script_content: str) -> int:
        """Run the command and return its exit code (1 if killed by a signal)."""
        config = self.config
        env = {**os.environ, **config.env_vars} if config.env_vars else None
        try:
            process = subprocess.Popen(
                [config.target_command, *config.target_args],
                stdin=subprocess.PIPE,
                cwd=config.working_dir,
                env=env,
            )
        except OSError:
            raise CommandNotFoundError(config.target_command) from None

        assert process.stdin is not None
        try:
            with process.stdin:
                process.stdin.write(script_content.encode("utf-8"))
        except OSError as exc:
            process.wait()
            raise ExecutionFailedError(f"Failed to write to stdin: {exc}") from exc

        try:
            returncode = process.wait(timeout=self.timeout_seconds)
        except subprocess.TimeoutExpired:
            try:
                process.kill()
            except OSError as kill_err:
                raise ExecutionFailedError(
                    f"Script execution timed out after {self.timeout_seconds} seconds "
                    f"and could not be terminated: {kill_err}"
                ) from None
            process.wait()
            raise ExecutionFailedError(
                f"Script execution timed out after {self.timeout_seconds} seconds"
            ) from None

        return returncode if returncode >= 0 else 1

    def validate_decision(self, proceed: bool) -> None:
        """Raise ExecutionBlockedError unless the user chose to proceed."""
        if not proceed:
            raise ExecutionBlockedError()

    def prepare_sandbox(self) -> None:
        """Check that the configuration can be executed."""
        if not self.config.target_command:
            raise InvalidArgumentsError("Target command is empty")