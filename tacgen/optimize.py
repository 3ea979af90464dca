"""Label renumbering and dead-code elimination over three-address code."""

from __future__ import annotations

import logging
from typing import Iterable

from tacgen.tac import Instruction, JumpKind, Operand, OperandType, OperatorType

logger = logging.getLogger(__name__)

_SIDE_EFFECT_OPS = frozenset(
    {
        OperatorType.GOTO,
        OperatorType.IF_GOTO,
        OperatorType.CALL,
        OperatorType.RETURN,
        OperatorType.PARAM,
        OperatorType.FUNC_BEGIN,
        OperatorType.FUNC_END,
        OperatorType.DEREF,
        OperatorType.INDEX_ASSIGN,
    }
)


def _value(operand: Operand | None) -> str:
    return operand.value if operand is not None else ""


def fix_labels(instructions: Iterable[Instruction | None]) -> list[Instruction]:
    """Drop unpatched jumps and renumber labels 1, 2, ... in order of appearance.

    Label operands are renamed in place, so jump targets that share them follow.
    """
    kept = [
        instr
        for instr in instructions
        if instr is not None
        and not (instr.jump is not JumpKind.NONE and (instr.result is None or instr.result.is_empty))
    ]

    numbering: dict[str, int] = {}
    label_operands: dict[int, Operand] = {}
    for instr in kept:
        label = instr.label
        if label is not None and label.type is OperandType.LABEL and label.value:
            numbering.setdefault(label.value, len(numbering) + 1)
            label_operands.setdefault(id(label), label)

    for label in label_operands.values():
        label.value = str(numbering[label.value])
    return kept


def eliminate_dead_code(instructions: Iterable[Instruction | None]) -> list[Instruction]:
    """One backward liveness pass removing instructions whose results are never used."""
    code = [instr for instr in instructions if instr is not None]

    referenced_labels = {
        instr.result.value
        for instr in code
        if instr.jump is not JumpKind.NONE and instr.result is not None and instr.result.value
    }

    used: set[str] = set()
    kept: list[Instruction] = []

    def mark(*values: str) -> None:
        used.update(v for v in values if v)

    for instr in reversed(code):
        result = _value(instr.result)
        arg1 = _value(instr.arg1)
        arg2 = _value(instr.arg2)

        if instr.jump is not JumpKind.NONE or instr.op in _SIDE_EFFECT_OPS:
            mark(arg1, arg2, result)
            kept.append(instr)
        elif instr.op is OperatorType.LABEL and result in referenced_labels:
            kept.append(instr)
        elif result and result in used:
            mark(arg1, arg2)
            kept.append(instr)
        elif not result and (arg1 or arg2):
            mark(arg1, arg2)
            kept.append(instr)

    kept.reverse()
    return kept


def remove_dead_code(instructions: Iterable[Instruction | None]) -> list[Instruction]:
    """Repeat dead-code elimination until the code stops shrinking."""
    code = [instr for instr in instructions if instr is not None]
    logger.debug("Removing dead code; size before: %d", len(code))
    while True:
        reduced = eliminate_dead_code(code)
        if len(reduced) >= len(code):
            break
        code = reduced
    logger.debug("Size after dead-code removal: %d", len(code))
    return code