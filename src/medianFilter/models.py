"""Pydantic models for validating median filter arguments."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

AUTO_AXIS = "auto"


class InvalidArgumentError(ValueError):
    """Raised for a malformed window, padding mode or axis."""


class Padding(str, Enum):
    """
    Edge handling at the start and end of the signal.

    ZEROPAD keeps the window length fixed by padding zeros.
    TRUNCATE shrinks the window towards 1 at the endpoints.
    """

    ZEROPAD = "zeropad"
    TRUNCATE = "truncate"


class FilterOptions(BaseModel):
    """Validated arguments for a single ``medfilt1`` call."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    window: int = Field(default=1, gt=0, description="Window length n, must be greater than 0.")
    padding: Padding = Field(default=Padding.ZEROPAD, description="Edge handling mode.")
    axis: int | Literal["auto"] = Field(
        default=AUTO_AXIS,
        description="Axis to filter along, or 'auto' for the first non-singleton axis.",
    )

    @field_validator("window", mode="before")
    @classmethod
    def _reject_bool_window(cls, value):
        if isinstance(value, bool):
            msg = "window must be an integer, got bool"
            raise ValueError(msg)
        return value

    @field_validator("padding", mode="before")
    @classmethod
    def _normalize_padding(cls, value):
        """Accept padding names in any case."""
        if isinstance(value, str) and not isinstance(value, Padding):
            return value.strip().lower()
        return value

    @field_validator("axis", mode="before")
    @classmethod
    def _normalize_axis(cls, value):
        if value is None:
            return AUTO_AXIS
        if isinstance(value, bool):
            msg = "axis must be an integer or 'auto', got bool"
            raise ValueError(msg)
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @classmethod
    def parse(cls, **kwargs) -> "FilterOptions":
        """
        Build options, reporting any validation failure as InvalidArgumentError.

        Raises:
            InvalidArgumentError: If any argument is malformed
        """
        try:
            return cls(**kwargs)
        except ValidationError as exc:
            raise InvalidArgumentError(str(exc)) from exc
