"""Textual rendering of three-address code."""

from __future__ import annotations

from typing import Iterable

from tacgen.tac import Instruction, JumpKind, Operand, OperandType, OperatorType, is_assignment

PROGRAM_HEADER = "===== Three-Address Code (TAC) ====="
INTERMEDIATE_HEADER = "===== Three-Address Code (TAC) intermediate ====="
FOOTER = "===================================="

_SYMBOLS = {
    OperatorType.ADD: "+",
    OperatorType.SUB: "-",
    OperatorType.MUL: "*",
    OperatorType.DIV: "/",
    OperatorType.MOD: "%",
    OperatorType.UMINUS: "-",
    OperatorType.DEREF: "*",
    OperatorType.EQ: "==",
    OperatorType.NE: "!=",
    OperatorType.GT: ">",
    OperatorType.LT: "<",
    OperatorType.GE: ">=",
    OperatorType.LE: "<=",
    OperatorType.AND: "&&",
    OperatorType.OR: "||",
    OperatorType.NOT: "!",
    OperatorType.BIT_AND: "&",
    OperatorType.BIT_OR: "|",
    OperatorType.BIT_XOR: "^",
    OperatorType.LEFT_SHIFT: "<<",
    OperatorType.RIGHT_SHIFT: ">>",
    OperatorType.BIT_NOT: "~",
    OperatorType.ASSIGN: "=",
    OperatorType.ADDR_OF: "&",
    OperatorType.INDEX: "[]",
}


def operand_string(operand: Operand | None) -> str:
    """Render an operand as it appears in printed code."""
    if operand is None:
        return ""
    if operand.type is OperandType.LABEL:
        return "I" + operand.value
    if operand.type is OperandType.POINTER:
        return "*" + operand.value
    if operand.type is OperandType.EMPTY:
        return ""
    return operand.value


def operator_symbol(op: OperatorType) -> str:
    """The source-level symbol of an operator, or an empty string."""
    return _SYMBOLS.get(op, "")


def operator_name(op: int) -> str:
    """The symbolic name of an operator, e.g. ``TAC_OPERATOR_ADD``."""
    try:
        return "TAC_OPERATOR_" + OperatorType(op).name
    except ValueError:
        return "UNKNOWN_OPERATOR"


def _is_empty(operand: Operand | None) -> bool:
    return operand is None or operand.is_empty


def _body(instruction: Instruction) -> str:
    op = instruction.op
    result = operand_string(instruction.result)
    arg1 = operand_string(instruction.arg1)
    arg2 = operand_string(instruction.arg2)

    if instruction.jump is JumpKind.GOTO:
        return f"goto {result}"
    if instruction.jump is JumpKind.IF_GOTO:
        return f"if {arg1} {operator_symbol(op)} {arg2} goto {result}"
    if op is OperatorType.CAST:
        return f"{result} = ({arg1}){arg2}"
    if op is OperatorType.PARAM:
        return f"param {result}"
    if op is OperatorType.CALL:
        if instruction.result is None or instruction.result.value == "":
            return f"call {arg1}, {arg2}"
        return f"{result} = call {arg1}, {arg2}"
    if op is OperatorType.RETURN:
        return f"return {result}"
    if op is OperatorType.FUNC_BEGIN:
        return f"function {result}"
    if op is OperatorType.FUNC_END:
        return f"end function {result}"
    if is_assignment(instruction):
        if not _is_empty(instruction.arg2):
            return f"{result} = {arg1} {operator_symbol(op)} {arg2}"
        if op is not OperatorType.NOP:
            return f"{result} = {operator_symbol(op)} {arg1}"
        return f"{result} = {arg1}"
    return "Nothing to print"


def format_instruction(instruction: Instruction) -> str:
    """Render one instruction as a single line, prefixed by its label."""
    label = instruction.label
    prefix = f"{label.value}: " if label is not None and label.type is OperandType.LABEL else ""
    return prefix + _body(instruction)


def _format_block(header: str, instructions: Iterable[Instruction | None]) -> str:
    lines = [header]
    lines.extend(format_instruction(i) for i in instructions if i is not None)
    lines.append(FOOTER)
    return "\n".join(lines) + "\n"


def format_program(instructions: Iterable[Instruction | None]) -> str:
    """Render the whole program between header and footer lines, skipping gaps."""
    return _format_block(PROGRAM_HEADER, instructions)


def format_code_vector(instructions: Iterable[Instruction | None]) -> str:
    """Render an intermediate code fragment between header and footer lines."""
    return _format_block(INTERMEDIATE_HEADER, instructions)