"""Count keyphrase occurrences in a text and check them against a range.

The keyphrase is compiled as a regular expression; callers escape it if they
want a literal match.
"""

from pathlib import Path
import re

from keyphrase_check.data_models.request import (
    CheckInputs,
    ValidationRequest,
    check_range,
)
from keyphrase_check.data_models.result import Outcome, ValidationResult
from keyphrase_check.data_models.source import ContentSource, FileReference, InlineText
from keyphrase_check.errors import ContentNotFoundError, InputExclusivityError


def build_request(inputs: CheckInputs) -> ValidationRequest:
    """Reconcile raw inputs into a request.

    Range consistency is checked before source exclusivity.
    """
    check_range(inputs.minimum_occurrences, inputs.maximum_occurrences)

    if bool(inputs.text_file) == bool(inputs.text):
        raise InputExclusivityError()
    source: ContentSource
    if inputs.text_file:
        source = FileReference(path=inputs.text_file)
    else:
        source = InlineText(text=inputs.text)

    return ValidationRequest(
        source=source,
        keyphrase=inputs.keyphrase,
        case_sensitive=inputs.case_sensitive,
        minimum_occurrences=inputs.minimum_occurrences,
        maximum_occurrences=inputs.maximum_occurrences,
    )


def read_content(source: ContentSource) -> str:
    if isinstance(source, InlineText):
        return source.text
    path = Path(source.path)
    if not path.exists():
        raise ContentNotFoundError(source.path)
    # raw bytes: keep \r\n as-is and replace undecodable bytes with U+FFFD
    return path.read_bytes().decode("utf-8", errors="replace")


def count_occurrences(content: str, keyphrase: str, case_sensitive: bool) -> int:
    """Number of non-overlapping matches of the keyphrase pattern, left to right."""
    flags = 0 if case_sensitive else re.IGNORECASE
    pattern = re.compile(keyphrase, flags)
    return sum(1 for _ in pattern.finditer(content))


def evaluate(occurrences: int, request: ValidationRequest) -> ValidationResult:
    """Check a count against both bounds; both failures can be reported at once."""
    minimum = request.minimum_occurrences
    maximum = request.maximum_occurrences
    outcomes: list[Outcome] = []
    messages: list[str] = []

    if occurrences < minimum:
        outcomes.append(Outcome.below_minimum)
        messages.append(
            f'Expected at least {minimum} occurrences of "{request.keyphrase}", '
            f"but found only {occurrences}"
        )
    if maximum is not None and occurrences > maximum:
        outcomes.append(Outcome.above_maximum)
        messages.append(
            f'Expected at most {maximum} occurrences of "{request.keyphrase}", '
            f"but found {occurrences}"
        )

    if not outcomes:
        bounds = f"minimum required: {minimum}"
        if maximum is not None:
            bounds += f", maximum allowed: {maximum}"
        outcomes.append(Outcome.success)
        messages.append(f"✅ Success! Found {occurrences} occurrences ({bounds})")

    return ValidationResult(
        occurrences=occurrences, outcomes=outcomes, messages=messages
    )


def validate(inputs: CheckInputs) -> ValidationResult:
    """Run the whole check. Raises KeyphraseCheckError on terminal input errors."""
    request = build_request(inputs)
    content = read_content(request.source)
    occurrences = count_occurrences(
        content, request.keyphrase, request.case_sensitive
    )
    return evaluate(occurrences, request)
