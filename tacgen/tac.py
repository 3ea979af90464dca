"""Three-address code operands, operators, instructions and their factory."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Iterable

MAX_CODE_SIZE = 1_000_000


class OperandType(Enum):
    """Kind of value an operand carries."""

    TEMP_VAR = auto()
    IDENTIFIER = auto()
    CONSTANT = auto()
    LABEL = auto()
    POINTER = auto()
    TYPE = auto()
    EMPTY = auto()
    STRING = auto()


@dataclass(eq=False)
class Operand:
    """A single operand of a three-address instruction.

    Operands are compared by identity: identifiers are shared objects and
    labels are patched in place.
    """

    type: OperandType = OperandType.EMPTY
    value: str = ""

    @property
    def is_empty(self) -> bool:
        return self.type is OperandType.EMPTY


class OperatorType(IntEnum):
    """Operators of the intermediate code."""

    ADD = 0
    SUB = auto()
    MUL = auto()
    DIV = auto()
    MOD = auto()
    UMINUS = auto()
    EQ = auto()
    NE = auto()
    GT = auto()
    LT = auto()
    GE = auto()
    LE = auto()
    AND = auto()
    OR = auto()
    NOT = auto()
    BIT_AND = auto()
    BIT_OR = auto()
    BIT_XOR = auto()
    LEFT_SHIFT = auto()
    RIGHT_SHIFT = auto()
    BIT_NOT = auto()
    ASSIGN = auto()
    ADDR_OF = auto()
    DEREF = auto()
    CAST = auto()
    GOTO = auto()
    IF_GOTO = auto()
    LABEL = auto()
    CALL = auto()
    RETURN = auto()
    PARAM = auto()
    FUNC_BEGIN = auto()
    FUNC_END = auto()
    INDEX = auto()
    INDEX_ASSIGN = auto()
    NOP = auto()


class JumpKind(IntEnum):
    """Whether an instruction is plain, an unconditional or a conditional jump."""

    NONE = 0
    GOTO = 1
    IF_GOTO = 2


@dataclass(eq=False)
class Instruction:
    """One three-address instruction; hashed by identity so it can sit in jump lists."""

    op: OperatorType
    result: Operand | None
    arg1: Operand | None
    arg2: Operand | None
    jump: JumpKind = JumpKind.NONE
    label: Operand | None = None


class CodeSizeError(RuntimeError):
    """Raised when more instructions are emitted than the code size allows."""


@dataclass
class TacContext:
    """Counters, interned identifiers and emitted code for one compilation."""

    max_code_size: int = MAX_CODE_SIZE
    identifiers: dict[str, Operand] = field(default_factory=dict)
    code: list[Instruction] = field(default_factory=list)
    _temp_id: int = 1
    _label_id: int = 1
    _emitted: int = 0

    def new_temp_var(self) -> Operand:
        """Return a fresh temporary named ``#t<n>``."""
        operand = Operand(OperandType.TEMP_VAR, f"#t{self._temp_id}")
        self._temp_id += 1
        return operand

    def new_empty_var(self) -> Operand:
        return Operand(OperandType.EMPTY, "")

    def new_label(self) -> Operand:
        """Return a fresh numbered label."""
        operand = Operand(OperandType.LABEL, str(self._label_id))
        self._label_id += 1
        return operand

    def new_constant(self, value: str) -> Operand:
        return Operand(OperandType.CONSTANT, value)

    def new_identifier(self, value: str) -> Operand:
        """Return the operand for an identifier, creating it on first use."""
        try:
            return self.identifiers[value]
        except KeyError:
            operand = self.identifiers[value] = Operand(OperandType.IDENTIFIER, value)
            return operand

    def new_type(self, value: str) -> Operand:
        return Operand(OperandType.TYPE, value)

    def new_string(self, value: str) -> Operand:
        return Operand(OperandType.STRING, value)

    def emit(
        self,
        op: OperatorType,
        result: Operand | None,
        arg1: Operand | None,
        arg2: Operand | None,
        jump: JumpKind = JumpKind.NONE,
    ) -> Instruction:
        """Build a new instruction carrying a fresh label."""
        if self._emitted >= self.max_code_size:
            raise CodeSizeError("Code size exceeded maximum limit.")
        self._emitted += 1
        return Instruction(
            op=OperatorType(op),
            result=result,
            arg1=arg1,
            arg2=arg2,
            jump=JumpKind(jump),
            label=self.new_label(),
        )


_NON_ASSIGNMENTS = frozenset({OperatorType.CALL, OperatorType.PARAM, OperatorType.RETURN})


def is_assignment(instruction: Instruction) -> bool:
    """True unless the instruction is a call, a parameter or a return."""
    return instruction.op not in _NON_ASSIGNMENTS


def backpatch(instructions: Iterable[Instruction], label: Operand) -> None:
    """Fill in the jump target of every instruction whose target is still empty."""
    for instruction in instructions:
        if instruction.result is not None and instruction.result.is_empty:
            instruction.result = label


def merge_lists(first: set[Instruction], second: Iterable[Instruction]) -> set[Instruction]:
    """Add ``second`` into ``first`` and return a copy of the merged set."""
    first.update(second)
    return set(first)