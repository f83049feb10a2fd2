import doctest
import inspect

import pytest

import _quotedio.errors
import _quotedio.tokenizer.quoted_tokenizer
import _quotedio.tokenizer.row_assembler


@pytest.mark.parametrize(
    "module",
    [_quotedio.tokenizer.quoted_tokenizer, _quotedio.tokenizer.row_assembler],
)
def test_docstring_examples(module):
    result = doctest.testmod(module)
    assert result.attempted > 0
    assert result.failed == 0


@pytest.mark.parametrize(
    "error_type",
    [
        obj
        for _, obj in inspect.getmembers(_quotedio.errors, inspect.isclass)
        if obj.__module__ == "_quotedio.errors"
    ],
)
def test_errors_are_documented(error_type):
    assert error_type.__doc__
    assert error_type.__doc__.strip()
