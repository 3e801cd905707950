"""Errors raised when a Ticket cannot be built from its raw fields.

Every failure is one of five variants. Only InvalidStatus carries an
underlying cause (the ParseStatusError it wraps); it is exposed through
``source`` and through the standard ``__cause__`` attribute, so generic
chain walkers and tracebacks both see it.
"""

from tickets.status import ParseStatusError


class TicketNewError(Exception):
    """Base class for all ticket validation failures."""

    field: str  # "title" | "description" | "status"

    @property
    def source(self) -> BaseException | None:
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TicketNewError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class TitleCannotBeEmpty(TicketNewError):
    field = "title"

    def __init__(self) -> None:
        super().__init__("Title cannot be empty")


class TitleTooLong(TicketNewError):
    field = "title"

    def __init__(self) -> None:
        super().__init__("Title cannot be longer than 50 bytes")


class DescriptionCannotBeEmpty(TicketNewError):
    field = "description"

    def __init__(self) -> None:
        super().__init__("Description cannot be empty")


class DescriptionTooLong(TicketNewError):
    field = "description"

    def __init__(self) -> None:
        super().__init__("Description cannot be longer than 500 bytes")


class InvalidStatus(TicketNewError):
    """Status text was rejected by the parser. Renders the parser's message as-is."""

    field = "status"

    def __init__(self, error: ParseStatusError) -> None:
        self.error = error
        super().__init__(str(error))
        self.__cause__ = error

    @property
    def source(self) -> ParseStatusError:
        return self.error
