from pydantic import BaseModel, ConfigDict, Field, model_validator

from keyphrase_check.data_models.source import ContentSource
from keyphrase_check.errors import ConfigurationError


def check_range(minimum: int, maximum: int | None) -> None:
    """Raise ConfigurationError if a configured maximum is below the minimum."""
    if maximum is not None and maximum < minimum:
        raise ConfigurationError(
            f"Invalid configuration: maximum-occurrences ({maximum}) must be "
            f"greater than or equal to minimum-occurrences ({minimum})"
        )


class CheckInputs(BaseModel):
    """Raw parameters as read from the runner or the command line.

    Empty strings mean "not supplied" for the two content fields.
    """

    model_config = ConfigDict(frozen=True)

    text_file: str = ""
    text: str = ""
    keyphrase: str
    case_sensitive: bool
    minimum_occurrences: int
    maximum_occurrences: int | None = None


class ValidationRequest(BaseModel):
    """A reconciled request: one content source and a consistent range."""

    model_config = ConfigDict(frozen=True)

    source: ContentSource
    keyphrase: str = Field(min_length=1)
    case_sensitive: bool
    minimum_occurrences: int = Field(ge=0)
    maximum_occurrences: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _max_not_below_min(self) -> "ValidationRequest":
        check_range(self.minimum_occurrences, self.maximum_occurrences)
        return self
