"""Tests for tickets.status."""

import pytest

from tickets.status import ParseStatusError, Status, parse_status


class TestParseStatus:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("ToDo", Status.TODO),
            ("todo", Status.TODO),
            ("INPROGRESS", Status.IN_PROGRESS),
            ("InProgress", Status.IN_PROGRESS),
            ("done", Status.DONE),
        ],
    )
    def test_accepts_any_case(self, text: str, expected: Status) -> None:
        assert parse_status(text) is expected

    def test_classmethod_alias(self) -> None:
        assert Status.parse("Done") is Status.DONE

    def test_invalid_message(self) -> None:
        with pytest.raises(ParseStatusError) as exc_info:
            parse_status("invalid")
        assert str(exc_info.value) == "`invalid` is not a valid status. Use one of: ToDo, InProgress, Done"

    def test_invalid_keeps_input_and_accepted(self) -> None:
        with pytest.raises(ParseStatusError) as exc_info:
            parse_status("In Progress")
        assert exc_info.value.invalid_status == "In Progress"
        assert exc_info.value.accepted == ("ToDo", "InProgress", "Done")

    def test_empty_is_invalid(self) -> None:
        with pytest.raises(ParseStatusError):
            parse_status("")

    def test_is_value_error(self) -> None:
        assert issubclass(ParseStatusError, ValueError)


def test_str_is_value() -> None:
    assert str(Status.IN_PROGRESS) == "InProgress"
