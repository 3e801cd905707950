"""The Ticket model. Every instance has passed the field checks below."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from tickets.errors import (
    DescriptionCannotBeEmpty,
    DescriptionTooLong,
    InvalidStatus,
    TitleCannotBeEmpty,
    TitleTooLong,
)
from tickets.status import ParseStatusError, Status, parse_status

TITLE_MAX_BYTES = 50
DESCRIPTION_MAX_BYTES = 500


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8", "surrogatepass"))


def check_fields(title: str, description: str, status: str) -> Status:
    """Run the field checks in order and return the parsed status.

    The first failing check raises; later checks do not run.
    """
    if not title:
        raise TitleCannotBeEmpty()
    if _byte_len(title) > TITLE_MAX_BYTES:
        raise TitleTooLong()
    if not description:
        raise DescriptionCannotBeEmpty()
    if _byte_len(description) > DESCRIPTION_MAX_BYTES:
        raise DescriptionTooLong()
    if isinstance(status, Status):
        return status
    try:
        return parse_status(status)
    except ParseStatusError as exc:
        raise InvalidStatus(exc) from exc


class Ticket(BaseModel):
    # strict: non-str input is rejected rather than coerced past the checks
    model_config = ConfigDict(frozen=True, strict=True)

    title: str
    description: str
    status: Status

    @model_validator(mode="before")
    @classmethod
    def run_field_checks(cls, data: Any) -> Any:
        # TicketNewError is not a ValueError, so pydantic lets it propagate unwrapped
        if not isinstance(data, Mapping):
            return data
        title, description, status = data.get("title"), data.get("description"), data.get("status")
        if not all(isinstance(v, str) for v in (title, description, status)):
            return data  # missing or mistyped fields are rejected by strict validation
        return {**data, "status": check_fields(title, description, status)}

    @classmethod
    def new(cls, title: str, description: str, status: str) -> "Ticket":
        """Build a Ticket from raw text, raising a TicketNewError on the first bad field."""
        return cls.model_validate({"title": title, "description": description, "status": status})

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> "Ticket":
        """Copy the ticket. With ``update`` the merged fields are validated as a new Ticket.

        All fields are immutable, so ``deep`` makes no difference to the result.
        """
        if not update:
            return super().model_copy(deep=deep)
        return type(self).model_validate({**self.model_dump(), **update})
