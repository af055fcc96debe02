from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class InlineText(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class FileReference(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text-file"] = "text-file"
    path: str  # as given; Path() would normalize "./x" to "x"


ContentSource = Annotated[InlineText | FileReference, Field(discriminator="kind")]
