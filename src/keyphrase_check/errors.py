"""Terminal errors raised while reconciling inputs and acquiring content.

These derive from Exception rather than ValueError so that pydantic validators
let them through unwrapped.
"""


class KeyphraseCheckError(Exception):
    """A terminal error: reported as-is, no occurrence count is produced."""


class ConfigurationError(KeyphraseCheckError):
    pass


class InputExclusivityError(KeyphraseCheckError):
    def __init__(self) -> None:
        super().__init__("Exactly one of 'text-file' or 'text' inputs must be provided")


class ContentNotFoundError(KeyphraseCheckError):
    def __init__(self, path: str) -> None:
        super().__init__(f"File does not exist: {path}")
        self.path = path
