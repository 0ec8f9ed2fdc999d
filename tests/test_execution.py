import sys
from pathlib import Path

import pytest

from ebiscan.errors import (
    CommandNotFoundError,
    ExecutionBlockedError,
    ExecutionFailedError,
    InvalidArgumentsError,
)
from ebiscan.execution import ExecutionConfig, SandboxConfig, ScriptRunner


def _python_config(script: str) -> ExecutionConfig:
    return ExecutionConfig(sys.executable, ["-"], script)


def test_execution_config():
    config = ExecutionConfig("bash", ["-c", "echo test"], "#!/bin/bash\necho hello")
    assert config.target_command == "bash"
    assert config.target_args == ["-c", "echo test"]
    assert not config.sandbox_mode
    assert config.full_command() == 'bash -c "echo test"'


def test_full_command_without_args():
    assert ExecutionConfig("bash", [], "echo").full_command() == "bash"


def test_config_validation():
    ExecutionConfig("bash", [], "echo test").validate()

    with pytest.raises(ValueError, match="Target command cannot be empty"):
        ExecutionConfig("", [], "echo test").validate()

    with pytest.raises(ValueError, match="Script content cannot be empty"):
        ExecutionConfig("bash", [], "").validate()


def test_zero_timeout_is_invalid():
    config = ExecutionConfig("bash", [], "echo").with_timeout(0)
    with pytest.raises(ValueError, match="Timeout must be greater than 0"):
        config.validate()


def test_sandbox_configs():
    default_sandbox = SandboxConfig()
    assert not default_sandbox.allow_network
    assert default_sandbox.max_memory_mb == 512
    assert default_sandbox.allow_filesystem_read == [Path("/tmp")]

    permissive = SandboxConfig.permissive()
    assert permissive.allow_network
    assert permissive.max_memory_mb is None

    restrictive = SandboxConfig.restrictive()
    assert not restrictive.allow_network
    assert restrictive.max_memory_mb == 128
    assert len(restrictive.allowed_commands) == 4


def test_config_builders():
    config = (
        ExecutionConfig("python", [], "print('hello')")
        .with_timeout(30)
        .with_sandbox()
        .with_env_var("PYTHONPATH", "/usr/lib")
        .with_working_dir("/tmp")
    )
    assert config.timeout_seconds == 30
    assert config.sandbox_mode
    assert config.env_vars.get("PYTHONPATH") == "/usr/lib"
    assert config.working_dir == Path("/tmp")


def test_builders_leave_original_unchanged():
    base = ExecutionConfig("python", [], "print(1)")
    base.with_env_var("A", "1")
    assert base.env_vars == {}


def test_runner_creation():
    runner = ScriptRunner(ExecutionConfig("bash", [], "echo test"))
    assert runner.timeout_seconds is None
    assert runner.with_timeout(60).timeout_seconds == 60


def test_validate_decision():
    runner = ScriptRunner(ExecutionConfig("bash", [], "echo test"))
    runner.validate_decision(True)
    with pytest.raises(ExecutionBlockedError):
        runner.validate_decision(False)


def test_prepare_sandbox():
    ScriptRunner(ExecutionConfig("bash", [], "echo test")).prepare_sandbox()
    with pytest.raises(InvalidArgumentsError):
        ScriptRunner(ExecutionConfig("", [], "echo test")).prepare_sandbox()


def test_script_runner_prepare_sandbox_fails_for_empty_command():
    runner = ScriptRunner(ExecutionConfig("", [], "echo test"))
    with pytest.raises(InvalidArgumentsError) as info:
        runner.prepare_sandbox()
    assert "Target command is empty" in str(info.value)


def test_execute_returns_exit_code():
    script = "import sys\nsys.exit(3)\n"
    assert ScriptRunner(_python_config(script)).execute(script) == 3


def test_execute_success_is_zero():
    script = "x = 1\n"
    assert ScriptRunner(_python_config(script)).execute(script) == 0


def test_execute_passes_env_vars():
    script = "import os, sys\nsys.exit(int(os.environ['EBI_TEST_CODE']))\n"
    config = _python_config(script).with_env_var("EBI_TEST_CODE", "5")
    assert ScriptRunner(config).execute(script) == 5


def test_execute_uses_working_dir(tmp_path):
    (tmp_path / "marker.txt").write_text("here")
    script = "import os, sys\nsys.exit(0 if os.path.exists('marker.txt') else 9)\n"
    config = _python_config(script).with_working_dir(tmp_path)
    assert ScriptRunner(config).execute(script) == 0


def test_execute_missing_command():
    config = ExecutionConfig("definitely-not-a-real-command-ebi", [], "echo")
    with pytest.raises(CommandNotFoundError) as info:
        ScriptRunner(config).execute("echo")
    assert info.value.command == "definitely-not-a-real-command-ebi"


def test_execute_timeout_kills_process():
    script = "import time\ntime.sleep(30)\n"
    runner = ScriptRunner(_python_config(script)).with_timeout(1)
    with pytest.raises(ExecutionFailedError) as info:
        runner.execute(script)
    assert "timed out after 1 seconds" in str(info.value)