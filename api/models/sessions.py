"""Session-related Pydantic models."""
from typing import Dict, List, Literal, Union

from pydantic import BaseModel, StrictStr, model_validator


class AnswerPayload(BaseModel):
    """Model for recording an answer."""

    value: Union[StrictStr, List[StrictStr], Dict[StrictStr, StrictStr]]


class NavigateRequest(BaseModel):
    """Model for moving the session cursor."""

    index: int | None = None
    direction: Literal["next", "previous"] | None = None

    @model_validator(mode="after")
    def one_target(self) -> "NavigateRequest":
        if (self.index is None) == (self.direction is None):
            raise ValueError("Provide either index or direction")
        return self
