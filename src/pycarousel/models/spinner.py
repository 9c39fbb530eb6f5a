"""Master spinner load-outcome record."""

from __future__ import annotations

from pydantic import model_validator

from pycarousel.models._base import CarouselBaseModel


class SpinnerRecord(CarouselBaseModel):
    """Load outcome of one tracked resource.

    ``complete`` is true exactly when the resource has settled, and at
    most one of ``success``/``error`` is ever set.
    """

    success: bool = False
    error: bool = False
    complete: bool = False

    @model_validator(mode="after")
    def _check_settlement(self) -> SpinnerRecord:
        if self.success and self.error:
            raise ValueError("a spinner record cannot be both success and error")
        if self.complete != (self.success or self.error):
            raise ValueError("complete must equal success or error")
        return self

    @classmethod
    def pending(cls) -> SpinnerRecord:
        return cls()

    @classmethod
    def succeeded(cls) -> SpinnerRecord:
        return cls(success=True, complete=True)

    @classmethod
    def failed(cls) -> SpinnerRecord:
        return cls(error=True, complete=True)
