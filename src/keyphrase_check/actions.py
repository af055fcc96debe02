"""Minimal GitHub Actions runner protocol: inputs, outputs, logs, failure."""

import os
from pathlib import Path
import re

_TRUE_VALUES = ("true", "True", "TRUE")
_FALSE_VALUES = ("false", "False", "FALSE")


def _env_names(name: str) -> list[str]:
    key = name.replace(" ", "_").upper()
    # composite actions can't export hyphenated env vars, so accept underscores
    return [f"INPUT_{key}", f"INPUT_{key.replace('-', '_')}"]


def get_input(name: str) -> str:
    """Return the stripped value of a runner input, "" when not supplied."""
    for env_name in _env_names(name):
        value = os.environ.get(env_name, "")
        if value:
            return value.strip()
    return ""


def require_input(name: str, value: str) -> str:
    if not value:
        raise ValueError(f"Input required and not supplied: {name}")
    return value


def parse_bool_input(name: str, value: str) -> bool:
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise TypeError(
        f'Input does not meet YAML 1.2 "Core Schema" specification: {name}\n'
        "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


def parse_int_input(value: str) -> int | None:
    """Parse a base-10 integer input; empty means not configured."""
    value = value.strip()
    if not value:
        return None
    if not re.fullmatch(r"[+-]?\d+", value, re.ASCII):
        raise ValueError(f"invalid base-10 integer: {value!r}")
    return int(value)


def _escape_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionsReporter:
    """Output sink for one run. `failed` drives the process exit status."""

    def __init__(self, output_file: Path | None = None) -> None:
        if output_file is None and os.environ.get("GITHUB_OUTPUT"):
            output_file = Path(os.environ["GITHUB_OUTPUT"])
        self.output_file = output_file
        self.failed = False

    def info(self, message: str) -> None:
        print(message)

    def set_output(self, name: str, value: object) -> None:
        if self.output_file is None:
            print(f"::set-output name={name}::{_escape_data(str(value))}")
            return
        with self.output_file.open("a", encoding="utf-8") as f:
            f.write(f"{name}={value}\n")

    def set_failed(self, message: str) -> None:
        self.failed = True
        print(f"::error::{_escape_data(message)}")
