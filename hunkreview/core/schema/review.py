from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReviewSuggestion(BaseModel):
    """A single (line, comment) pair as emitted by the model.

    ``line_number`` stays a string until the comment mapper coerces it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    line_number: str = Field(alias="lineNumber")
    review_comment: str = Field(alias="reviewComment")

    @field_validator("line_number", mode="before")
    @classmethod
    def _number_to_text(cls, value: object) -> object:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return str(value)
        return value


@dataclass(frozen=True, slots=True)
class ReviewComment:
    body: str
    path: str
    line: Optional[int]
