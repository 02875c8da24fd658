"""Tests for the exception hierarchy."""

import pytest

from vcf_matrix import exceptions
from vcf_matrix.exceptions import (
    CorruptStreamError,
    LineTooLongError,
    MalformedTokenError,
    SchemaMismatchError,
    VCFFormatError,
    VCFMatrixError,
)


@pytest.mark.parametrize("name", exceptions.__all__)
def test_exported_classes_documented(name: str) -> None:
    cls = getattr(exceptions, name)
    assert issubclass(cls, VCFMatrixError)
    assert cls.__doc__ and cls.__doc__.strip()


def test_line_too_long_message() -> None:
    err = LineTooLongError(1_000_000, line_number=4)
    assert isinstance(err, MalformedTokenError)
    assert err.limit == 1_000_000
    assert str(err) == "line 4: line exceeds maximum length of 1,000,000 characters"


def test_format_errors_are_value_errors() -> None:
    assert issubclass(CorruptStreamError, VCFFormatError)
    assert issubclass(SchemaMismatchError, ValueError)
    assert SchemaMismatchError(11, 10, 3).line_number == 3
