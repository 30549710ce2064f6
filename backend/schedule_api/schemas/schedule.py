"""Schedule Schemas — explicit request/response records for the schedule endpoints.

Invariants:
    - ScheduleFields accepts any JSON value per field; required-ness is checked by
      require_all() using JSON-client truthiness: "" / 0 / false / null / absent are
      rejected, empty arrays and objects are accepted
    - No trimming, coercion, or length limits: what passes the check is stored verbatim
    - Envelope omits data/error when absent (routes use response_model_exclude_none)

Design Decisions:
    - Fields typed Any rather than str: a missing or falsy field must produce the
      uniform 400 "All fields are required!" instead of a per-field 422
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from schedule_api.core.errors import MissingFieldsError

REQUIRED_FIELDS = ("title", "day", "date", "time")


def is_blank(value: Any) -> bool:
    """True for values a JavaScript client treats as falsy: null, false, "", 0."""
    if value is None or value is False or value == "":
        return True
    return (
        isinstance(value, (int, float)) and not isinstance(value, bool)
        and value == 0
    )


class ScheduleFields(BaseModel):
    """Body of POST /schedule and PUT /schedule/{id}."""
    model_config = ConfigDict(extra="ignore")

    title: Any = None
    day: Any = None
    date: Any = None
    time: Any = None

    def missing_fields(self) -> list[str]:
        return [name for name in REQUIRED_FIELDS if is_blank(getattr(self, name))]

    def require_all(self) -> dict[str, Any]:
        """Return the four fields, or raise MissingFieldsError if any is falsy."""
        missing = self.missing_fields()
        if missing:
            raise MissingFieldsError(missing)
        return {name: getattr(self, name) for name in REQUIRED_FIELDS}


class Envelope(BaseModel):
    """Uniform {success, message, data?, error?} wrapper for non-list responses."""
    success: bool
    message: str
    data: Any = None
    error: str | None = None
