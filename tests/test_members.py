import pytest

from tacgen.members import MemberInfo, TypeDefinition
from tacgen.typesys import AccessSpecifier, MemberKind, TypeCategory


@pytest.fixture
def point() -> TypeDefinition:
    definition = TypeDefinition(TypeCategory.CLASS)
    definition.add_member("x", "int", MemberKind.DATA, AccessSpecifier.PRIVATE)
    definition.add_member("y", "int", MemberKind.DATA, AccessSpecifier.PROTECTED)
    definition.add_member("move", ("int",), MemberKind.FUNCTION, AccessSpecifier.PUBLIC)
    definition.add_member("move", ("int", "int"), MemberKind.FUNCTION, AccessSpecifier.PUBLIC)
    return definition


def test_category_is_kept():
    definition = TypeDefinition(TypeCategory.STRUCT)
    assert definition.type_category is TypeCategory.STRUCT
    assert definition.members == []


def test_category_coerced_from_int():
    definition = TypeDefinition(int(TypeCategory.UNION))
    assert definition.type_category is TypeCategory.UNION


def test_add_member_returns_record():
    definition = TypeDefinition(TypeCategory.STRUCT)
    member = definition.add_member("count", "int", MemberKind.DATA, AccessSpecifier.PUBLIC)
    assert member == MemberInfo("count", "int", MemberKind.DATA, AccessSpecifier.PUBLIC)
    assert definition.members == [member]


def test_add_member_coerces_enums():
    definition = TypeDefinition(TypeCategory.CLASS)
    member = definition.add_member(
        "f", "void", int(MemberKind.FUNCTION), int(AccessSpecifier.PRIVATE)
    )
    assert member.kind is MemberKind.FUNCTION
    assert member.access_specifier is AccessSpecifier.PRIVATE


def test_lookup_member(point):
    assert point.lookup_member("x")
    assert point.lookup_member("move")
    assert not point.lookup_member("z")


def test_access_specifier(point):
    assert point.get_member_access_specifier("x") is AccessSpecifier.PRIVATE
    assert point.get_member_access_specifier("y") is AccessSpecifier.PROTECTED
    assert point.get_member_access_specifier("move") is AccessSpecifier.PUBLIC


def test_access_specifier_missing_raises(point):
    with pytest.raises(KeyError):
        point.get_member_access_specifier("missing")


def test_overloads_kept_in_order(point):
    overloads = point.get_members_by_name("move")
    assert [m.type for m in overloads] == [("int",), ("int", "int")]
    assert all(m.kind is MemberKind.FUNCTION for m in overloads)


def test_members_by_unknown_name_is_empty(point):
    assert point.get_members_by_name("nothing") == []


def test_members_preserve_declaration_order(point):
    assert [m.name for m in point.members] == ["x", "y", "move", "move"]