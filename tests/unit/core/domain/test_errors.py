"""Unit tests for domain error types."""

from todo_cli.core.domain.errors import (
    ConfigError,
    FileIOError,
    NotFoundError,
    ParseError,
    TodoCliError,
    ValidationError,
)


def test_error_codes():
    assert FileIOError("x").code == "file_io_error"
    assert ParseError("x").code == "parse_error"
    assert ValidationError("x").code == "validation_error"
    assert NotFoundError(3).code == "not_found"
    assert ConfigError("x").code == "config_error"


def test_all_errors_share_base_and_exit_code():
    for error in (FileIOError("x"), ParseError("x"), ValidationError("x"), NotFoundError(1)):
        assert isinstance(error, TodoCliError)
        assert error.exit_code == 1


def test_not_found_message_and_details():
    error = NotFoundError(42)
    assert str(error) == "Todo #42 not found."
    assert error.todo_id == 42
    assert error.details == {"todo_id": 42}


def test_path_is_recorded_in_details():
    error = ParseError("bad", path="/tmp/todos.json")
    assert error.path == "/tmp/todos.json"
    assert error.details["path"] == "/tmp/todos.json"
