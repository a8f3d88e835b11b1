"""Tests for input validators."""
import pytest

from dataroom.domain.exceptions import FileTooLargeError, UnsupportedFileTypeError, ValidationError
from dataroom.utils.validators import validate_file_size, validate_file_type, validate_name


def test_validate_name_returns_trimmed_name():
    assert validate_name("  Board Minutes  ") == "Board Minutes"


def test_validate_name_allows_parentheses_and_dots():
    assert validate_name("report (1).final.pdf") == "report (1).final.pdf"


@pytest.mark.parametrize("name", ["", "  ", "a\\b", "a/b", "a:b", "a*b", "a?b", 'a"b', "a<b", "a>b", "a|b"])
def test_validate_name_rejects(name):
    with pytest.raises(ValidationError):
        validate_name(name)


def test_validate_name_length_limit():
    assert validate_name("x" * 255) == "x" * 255
    with pytest.raises(ValidationError, match="too long"):
        validate_name("x" * 256)


def test_validate_name_uses_label():
    with pytest.raises(ValidationError, match="Folder name cannot be empty"):
        validate_name("", "Folder name")


def test_validate_file_size():
    validate_file_size(5 * 1024 * 1024, 5 * 1024 * 1024)
    with pytest.raises(FileTooLargeError, match="max 5MB"):
        validate_file_size(5 * 1024 * 1024 + 1, 5 * 1024 * 1024)


def test_validate_file_type():
    validate_file_type("application/pdf", ["application/pdf"])
    with pytest.raises(UnsupportedFileTypeError):
        validate_file_type("text/plain", ["application/pdf"])


def test_validation_errors_are_value_errors():
    with pytest.raises(ValueError):
        validate_name("")
