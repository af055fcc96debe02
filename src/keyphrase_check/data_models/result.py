from enum import Enum

from pydantic import BaseModel, ConfigDict


class Outcome(str, Enum):
    success = "success"
    below_minimum = "below_minimum"
    above_maximum = "above_maximum"


class ValidationResult(BaseModel):
    """Occurrence count plus one message per outcome.

    outcomes is either [success] or the failed checks in evaluation order
    (below_minimum before above_maximum).
    """

    model_config = ConfigDict(frozen=True)

    occurrences: int
    outcomes: list[Outcome]
    messages: list[str]

    @property
    def passed(self) -> bool:
        return self.outcomes == [Outcome.success]

    def failures(self) -> list[str]:
        return [
            msg
            for outcome, msg in zip(self.outcomes, self.messages, strict=True)
            if outcome is not Outcome.success
        ]
