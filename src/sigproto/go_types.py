"""Signature type name -> Go type mapping."""

from __future__ import annotations

from collections.abc import Mapping

_BUILTIN_TYPES: dict[str, str] = {
    "Int": "int",
    "Integer": "int",
    "Int8": "int8",
    "Int16": "int16",
    "Int32": "int32",
    "Int64": "int64",
    "Word": "uint",
    "Word8": "uint8",
    "Word16": "uint16",
    "Word32": "uint32",
    "Word64": "uint64",
    "Float": "float64",
    "Float32": "float32",
    "Float64": "float64",
    "Double": "float64",
    "String": "string",
    "Text": "string",
    "Bool": "bool",
    "Char": "rune",
    "Byte": "byte",
}


def map_type(type_name: str, overrides: Mapping[str, str] | None = None) -> str:
    """Map a signature type name to a Go type.

    Overrides win over the built-in table; unknown names pass through
    unchanged so user-defined Go types can be referenced directly.
    """
    if overrides and type_name in overrides:
        return overrides[type_name]
    return _BUILTIN_TYPES.get(type_name, type_name)
