"""Primitive types, type categories, access specifiers and member kinds."""

from __future__ import annotations

from enum import IntEnum


class PrimitiveType(IntEnum):
    """Built-in scalar types, in promotion order."""

    ERROR = -1
    U_CHAR = 0
    CHAR = 1
    U_SHORT = 2
    SHORT = 3
    U_INT = 4
    INT = 5
    U_LONG = 6
    LONG = 7
    U_LONG_LONG = 8
    LONG_LONG = 9
    FLOAT = 10
    DOUBLE = 11
    LONG_DOUBLE = 12
    VOID = 13
    VOID_STATEMENT = 15


N_PRIMITIVE_TYPES = 14


class TypeCategory(IntEnum):
    """Broad category a type belongs to."""

    ERROR = -1
    PRIMITIVE = 0
    POINTER = 1
    ARRAY = 2
    FUNCTION = 3
    CLASS = 4
    STRUCT = 5
    UNION = 6


class AccessSpecifier(IntEnum):
    """Visibility of a class or struct member."""

    PUBLIC = 0
    PRIVATE = 1
    PROTECTED = 2


class MemberKind(IntEnum):
    """What a class or struct member is."""

    DATA = 0
    FUNCTION = 1
    CONSTRUCTOR = 2
    DESTRUCTOR = 3


_PRIMITIVE_NAMES = {
    PrimitiveType.ERROR: "error",
    PrimitiveType.U_CHAR: "unsigned char",
    PrimitiveType.CHAR: "char",
    PrimitiveType.U_SHORT: "unsigned short",
    PrimitiveType.SHORT: "short",
    PrimitiveType.U_INT: "unsigned int",
    PrimitiveType.INT: "int",
    PrimitiveType.U_LONG: "unsigned long",
    PrimitiveType.LONG: "long",
    PrimitiveType.U_LONG_LONG: "unsigned long long",
    PrimitiveType.LONG_LONG: "long long",
    PrimitiveType.FLOAT: "float",
    PrimitiveType.DOUBLE: "double",
    PrimitiveType.LONG_DOUBLE: "long double",
    PrimitiveType.VOID: "void",
}

_PRIMITIVE_SIZES = {
    PrimitiveType.U_CHAR: 1,
    PrimitiveType.CHAR: 1,
    PrimitiveType.U_SHORT: 2,
    PrimitiveType.SHORT: 2,
    PrimitiveType.U_INT: 4,
    PrimitiveType.INT: 4,
    PrimitiveType.U_LONG: 4,
    PrimitiveType.LONG: 4,
    PrimitiveType.U_LONG_LONG: 8,
    PrimitiveType.LONG_LONG: 8,
    PrimitiveType.FLOAT: 4,
    PrimitiveType.DOUBLE: 8,
    PrimitiveType.LONG_DOUBLE: 8,
}

_CATEGORY_NAMES = {
    TypeCategory.ERROR: "error",
    TypeCategory.PRIMITIVE: "primitive",
    TypeCategory.POINTER: "pointer",
    TypeCategory.ARRAY: "array",
    TypeCategory.FUNCTION: "function",
    TypeCategory.CLASS: "class",
    TypeCategory.STRUCT: "struct",
    TypeCategory.UNION: "union",
}

_ACCESS_NAMES = {
    AccessSpecifier.PUBLIC: "public",
    AccessSpecifier.PRIVATE: "private",
    AccessSpecifier.PROTECTED: "protected",
}


def primitive_type_name(index: int) -> str:
    """Spelling of a primitive type, or an empty string if it has none."""
    return _PRIMITIVE_NAMES.get(index, "")


def primitive_type_size(index: int) -> int:
    """Size in bytes of a primitive type; 0 for types without storage."""
    return _PRIMITIVE_SIZES.get(index, 0)


def type_category_name(category: int) -> str:
    """Name of a type category, or an empty string if unknown."""
    return _CATEGORY_NAMES.get(category, "")


def access_specifier_name(specifier: int) -> str:
    """Keyword of an access specifier, or an empty string if unknown."""
    return _ACCESS_NAMES.get(specifier, "")