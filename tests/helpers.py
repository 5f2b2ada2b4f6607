"""Shared test helpers for the sigproto test suite."""

from __future__ import annotations

import pytest

from sigproto.errors import SignatureError
from sigproto.parser import parse
from sigproto.signature import FunctionSignature, Parameter


def params(*pairs: tuple[str, str]) -> list[Parameter]:
    """Build a parameter list from (name, type) pairs."""
    return [Parameter(name=name, type_name=type_name) for name, type_name in pairs]


def parse_ok(source: str) -> FunctionSignature:
    """Parse source, failing the test with the diagnostic on error."""
    try:
        return parse(source)
    except SignatureError as e:
        pytest.fail(f"unexpected {e.code}: {e.diagnostic.message}")


def parse_fails(source: str, error_code: str) -> SignatureError:
    """Parse source, asserting it fails with the given error code."""
    with pytest.raises(SignatureError) as excinfo:
        parse(source)
    assert excinfo.value.code == error_code, (
        f"Expected error {error_code} but got {excinfo.value.code}: "
        f"{excinfo.value.diagnostic.message}"
    )
    return excinfo.value
