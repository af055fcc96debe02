"""Check that a text mentions a keyphrase a bounded number of times.

Usage:
    python -m keyphrase_check --text-file CONTRIBUTING.md --keyphrase GitHub \\
        --case-sensitive true --minimum-occurrences 1 [--maximum-occurrences 3]

Every flag defaults to the GitHub Actions input of the same name, so inside a
workflow step the command can be run without arguments.
"""

import argparse
from typing import Protocol

from keyphrase_check.actions import (
    ActionsReporter,
    get_input,
    parse_bool_input,
    parse_int_input,
    require_input,
)
from keyphrase_check.check import validate
from keyphrase_check.data_models.request import CheckInputs
from keyphrase_check.data_models.result import ValidationResult
from keyphrase_check.errors import KeyphraseCheckError


class Reporter(Protocol):
    def info(self, message: str) -> None: ...

    def set_output(self, name: str, value: object) -> None: ...

    def set_failed(self, message: str) -> None: ...


def run(inputs: CheckInputs, reporter: Reporter) -> ValidationResult | None:
    """Validate inputs and report through reporter. Never raises.

    Returns None when a terminal error stopped the run before counting.
    """
    try:
        result = validate(inputs)
        reporter.set_output("occurrences", result.occurrences)
        casing = "case-sensitive" if inputs.case_sensitive else "case-insensitive"
        reporter.info(
            f'Found {result.occurrences} occurrences of "{inputs.keyphrase}" '
            f"({casing}) in {inputs.text_file or 'provided text'}"
        )

        if result.passed:
            reporter.info(result.messages[0])
        for message in result.failures():
            reporter.set_failed(message)
        return result
    except KeyphraseCheckError as e:
        reporter.set_failed(str(e))
    except Exception as e:
        reporter.set_failed(f"Action failed with error: {e}")
    return None


def parse_inputs(args: argparse.Namespace) -> CheckInputs:
    keyphrase = require_input("keyphrase", args.keyphrase)
    case_sensitive = require_input("case-sensitive", args.case_sensitive)
    minimum = require_input("minimum-occurrences", args.minimum_occurrences)
    return CheckInputs(
        text_file=args.text_file,
        text=args.text,
        keyphrase=keyphrase,
        case_sensitive=parse_bool_input("case-sensitive", case_sensitive),
        minimum_occurrences=parse_int_input(minimum),
        maximum_occurrences=parse_int_input(args.maximum_occurrences),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Count keyphrase occurrences and check them against a range"
    )
    parser.add_argument("--text-file", default=get_input("text-file"))
    parser.add_argument("--text", default=get_input("text"))
    parser.add_argument(
        "--keyphrase", default=get_input("keyphrase"), help="Regular expression"
    )
    parser.add_argument(
        "--case-sensitive",
        default=get_input("case-sensitive"),
        help="true or false",
    )
    parser.add_argument(
        "--minimum-occurrences", default=get_input("minimum-occurrences")
    )
    parser.add_argument(
        "--maximum-occurrences", default=get_input("maximum-occurrences")
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    reporter = ActionsReporter()
    try:
        inputs = parse_inputs(args)
    except Exception as e:
        reporter.set_failed(f"Action failed with error: {e}")
        return 1
    run(inputs, reporter)
    return 1 if reporter.failed else 0
