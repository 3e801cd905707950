"""Render an error and its cause chain for display."""

from collections.abc import Iterator

from rich.console import Console
from rich.markup import escape

from tickets.settings import ReportSettings, get_report_settings


def _cause_of(err: BaseException) -> BaseException | None:
    source = getattr(err, "source", None)
    if isinstance(source, BaseException):
        return source
    return err.__cause__


def iter_causes(err: BaseException) -> Iterator[BaseException]:
    """Yield err, then each underlying cause in turn. Stops on cycles."""
    seen: set[int] = set()
    current: BaseException | None = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = _cause_of(current)


def format_error_chain(err: BaseException) -> list[str]:
    """Return one line per error in the chain.

    InvalidStatus -> ["`x` is not a valid status. ...", "caused by: `x` is not a valid status. ..."]
    """
    chain = list(iter_causes(err))
    return [str(chain[0])] + [f"caused by: {cause}" for cause in chain[1:]]


def print_error(
    err: BaseException,
    console: Console | None = None,
    settings: ReportSettings | None = None,
) -> None:
    settings = settings or get_report_settings()
    console = console or Console(stderr=True, no_color=not settings.color)
    first, *causes = format_error_chain(err)
    console.print(f"[red]error:[/red] {escape(first)}")
    if not settings.show_causes:
        return
    for line in causes:
        console.print(f"  [dim]{escape(line)}[/dim]")
