"""Member records for user-defined struct, union and class types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tacgen.typesys import AccessSpecifier, MemberKind, TypeCategory


@dataclass
class MemberInfo:
    """One member of a user-defined type."""

    name: str
    type: Any
    kind: MemberKind = MemberKind.DATA
    access_specifier: AccessSpecifier = AccessSpecifier.PUBLIC


@dataclass
class TypeDefinition:
    """The members of a struct, union or class, kept in declaration order."""

    type_category: TypeCategory
    members: list[MemberInfo] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.type_category = TypeCategory(self.type_category)

    def add_member(
        self,
        name: str,
        type: Any,
        kind: MemberKind = MemberKind.DATA,
        access_specifier: AccessSpecifier = AccessSpecifier.PUBLIC,
    ) -> MemberInfo:
        """Append a member; overloads of the same name are kept side by side."""
        member = MemberInfo(name, type, MemberKind(kind), AccessSpecifier(access_specifier))
        self.members.append(member)
        return member

    def get_member_access_specifier(self, member: str) -> AccessSpecifier:
        """Access specifier of the first member with this name.

        Raises KeyError if the type has no such member.
        """
        for info in self.members:
            if info.name == member:
                return info.access_specifier
        raise KeyError(member)

    def get_members_by_name(self, member: str) -> list[MemberInfo]:
        """All members with this name, in declaration order."""
        return [info for info in self.members if info.name == member]

    def lookup_member(self, member: str) -> bool:
        """True if the type declares a member with this name."""
        return any(info.name == member for info in self.members)