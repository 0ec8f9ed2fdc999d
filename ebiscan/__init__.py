"""Options, localized messages, confirmation prompts and script execution for reviewing a script before running it."""

__version__ = "0.1.0"