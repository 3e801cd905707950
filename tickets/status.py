"""Ticket status values and parsing from free text."""

from enum import Enum


class ParseStatusError(ValueError):
    def __init__(self, invalid_status: str, accepted: tuple[str, ...]) -> None:
        self.invalid_status = invalid_status
        self.accepted = accepted
        super().__init__(f"`{invalid_status}` is not a valid status. Use one of: {', '.join(accepted)}")


class Status(str, Enum):
    """Lifecycle states a ticket can be in."""

    TODO = "ToDo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Status":
        return parse_status(text)


_BY_LOWER = {s.value.lower(): s for s in Status}


def parse_status(text: str) -> Status:
    """Return the Status matching text, ignoring case.

    Raises ParseStatusError listing the accepted values otherwise.
    """
    try:
        return _BY_LOWER[text.lower()]
    except KeyError:
        raise ParseStatusError(text, tuple(s.value for s in Status)) from None
