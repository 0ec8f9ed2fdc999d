# ebiscan

ebiscan holds the pieces of a tool for the moment between downloading a
script and running it: reading the command line, choosing an output
language (English or Japanese), localized risk prompts and report labels,
asking the user for confirmation, and finally piping the script into the
interpreter that was named.

The package has no third-party dependencies.

## Modules

- `ebiscan.cli`: `build_parser()`, `parse_args(argv)` and `CliOptions`.
- `ebiscan.locale`: the enums `OutputLanguage`, `RiskLevel`,
  `ExecutionRecommendation` and `SecurityRelevance`, locale detection, and
  the localized prompt, warning and guidance texts.
- `ebiscan.strings`: `LocalizedStrings`, report labels looked up by key.
- `ebiscan.execution`: `ExecutionConfig`, `SandboxConfig` and
  `ScriptRunner`.
- `ebiscan.prompt`: `UserPrompter` and `ExecutionDecision`.
- `ebiscan.errors`: the `EbiError` family of exceptions and
  `exit_code_for`.

## Reading options

```python
from ebiscan.cli import parse_args

options = parse_args(["--output-lang", "english", "-t", "60", "bash", "-s", "arg1"])
options.target_command()   # "bash"
options.target_args()      # ["-s", "arg1"]
options.timeout_seconds()  # 60, unless EBI_DEFAULT_TIMEOUT holds a valid value
options.output_language()  # OutputLanguage.ENGLISH, unless EBI_OUTPUT_LANGUAGE is set
```

The options are `-l/--lang` (`bash` or `python`), `-m/--model` (default
`gpt-5-mini`), `-t/--timeout` (10 to 300 seconds, default 300),
`-v/--verbose`, `-d/--debug` (which also implies verbose),
`--output-lang` and `-V/--version`. Everything from the first positional
argument on is the target command and its arguments. Bad input raises
`InvalidArgumentsError`; an unknown `--lang` raises `UnknownLanguageError`.

The output language is chosen in this order:

1. the `EBI_OUTPUT_LANGUAGE` environment variable;
2. `--output-lang`;
3. the system locale, read from `LC_ALL`, `LC_MESSAGES`, `LANG` and
   `LANGUAGE` in that order;
4. English.

`OutputLanguage.parse` accepts `english`, `en`, `japanese` and `ja`.
Setting `NO_COLOR` makes `should_use_color()` return false.
`language_debug_info()` describes how the language was chosen.

## Localized text

```python
from ebiscan.locale import OutputLanguage, RiskLevel, get_execution_guidance, parse_locale
from ebiscan.strings import LocalizedStrings

parse_locale("ja_JP.UTF-8")   # OutputLanguage.JAPANESE
parse_locale("fr_FR.UTF-8")   # None

recommendation, advice = get_execution_guidance(RiskLevel.HIGH, OutputLanguage.ENGLISH)
# recommendation is ExecutionRecommendation.DANGEROUS

japanese = LocalizedStrings(OutputLanguage.JAPANESE)
japanese.get_risk_level("high")                      # "高"
japanese.get_analysis_section("analysis_summary")    # "分析サマリー"
japanese.get("no_such_key")                          # ""
```

## Asking the user

```python
from ebiscan.locale import ExecutionRecommendation, RiskLevel
from ebiscan.prompt import UserPrompter

prompter = UserPrompter.for_cli(options)
decision = prompter.prompt_execution_decision(RiskLevel.MEDIUM, ExecutionRecommendation.CAUTION)
if decision.proceed:
    ...
```

The recommendation may also be given as a plain advice string. Answers
`yes`, `y`, `execute` and `proceed` approve; `no`, `n`, `cancel`, `abort`,
`stop`, an empty answer and end of input decline; `review`, `details`,
`show` and `more` also decline. Anything else is asked again. When stdin is
piped, the answer is read from `/dev/tty`.

`UserPrompter.for_cli` uses no timeout in debug mode; otherwise it uses
`EBI_PROMPT_TIMEOUT` (clamped to 10–900 seconds) or the analysis timeout
capped at 300. When the timeout runs out, `UserInputTimeoutError` is
raised. A `reader` callable can be passed to the constructor to supply
answers instead of the terminal.

## Running a script

```python
from ebiscan.execution import ExecutionConfig, ScriptRunner

config = ExecutionConfig("bash", ["-s"], "echo hello")
config.validate()        # raises ValueError if unusable
config.full_command()    # "bash -s"

runner = ScriptRunner(config).with_timeout(30)
runner.prepare_sandbox()
runner.validate_decision(decision.proceed)   # raises ExecutionBlockedError if declined
exit_status = runner.execute(config.script_content)
```

`execute` starts the command with the config's environment variables and
working directory, writes the script to its standard input and returns its
exit status (1 if it was killed by a signal). If the command cannot be
started it raises `CommandNotFoundError`; if writing fails or the
runner's timeout passes, it raises `ExecutionFailedError`.
`SandboxConfig` (with `permissive()` and `restrictive()`) only describes
limits; nothing enforces them.

## Errors and exit codes

Every failure is a subclass of `EbiError`. `exit_code_for(error)` gives
the status a front end should exit with:

| Exit code | Errors |
|-----------|--------|
| 2 | unknown language, parse error |
| 3 | analysis unavailable or timed out, LLM client error, execution blocked, token limit exceeded |
| 4 | no input |
| 5 | invalid arguments |
| 6 | command not found |
| 7 | execution failed |
| 1 | anything else, including an invalid LLM response, a configuration error and a user input timeout |

## What this package does not do

- It installs no command: there is no `ebi` program to run, only the
  functions above for building one.
- It does not analyse scripts itself. There is no language-model client,
  no script parser and no detection of a script's language from its
  content; risk levels and recommendations must come from the caller.
- It does not format full analysis reports; it provides the labels and
  messages a report would use.