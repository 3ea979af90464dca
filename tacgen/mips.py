"""MIPS registers, opcodes and the instruction records built by the code generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto


class MIPSRegister(IntEnum):
    """General purpose, special and floating point registers."""

    ZERO = 0
    AT = auto()
    V0 = auto()
    V1 = auto()
    A0 = auto()
    A1 = auto()
    A2 = auto()
    A3 = auto()
    T0 = auto()
    T1 = auto()
    T2 = auto()
    T3 = auto()
    T4 = auto()
    T5 = auto()
    T6 = auto()
    T7 = auto()
    T8 = auto()
    T9 = auto()
    S0 = auto()
    S1 = auto()
    S2 = auto()
    S3 = auto()
    S4 = auto()
    S5 = auto()
    S6 = auto()
    S7 = auto()
    GP = auto()
    SP = auto()
    FP = auto()
    RA = auto()
    HI = auto()
    LO = auto()
    # F0 and F1 hold return values.
    F0 = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    F13 = auto()
    F14 = auto()
    F15 = auto()
    F16 = auto()
    F17 = auto()
    F18 = auto()
    F19 = auto()
    F20 = auto()
    F21 = auto()
    F22 = auto()
    F23 = auto()
    F24 = auto()
    F25 = auto()
    F26 = auto()
    F27 = auto()
    F28 = auto()
    F29 = auto()
    F30 = auto()
    F31 = auto()

    @property
    def is_float(self) -> bool:
        """True for the floating point registers F0..F31."""
        return self >= MIPSRegister.F0


class MIPSOpcode(IntEnum):
    """Instruction mnemonics understood by the code generator."""

    # Arithmetic
    ADD = 0
    ADDU = auto()
    ADDIU = auto()
    SUB = auto()
    SUBU = auto()
    SUBIU = auto()
    MUL = auto()
    MULU = auto()
    MULT = auto()
    MULTU = auto()
    DIV = auto()
    DIVU = auto()
    ADD_S = auto()
    ADD_D = auto()
    SUB_S = auto()
    SUB_D = auto()
    MUL_S = auto()
    MUL_D = auto()
    DIV_S = auto()
    DIV_D = auto()
    # Negation
    NEG = auto()
    NEG_S = auto()
    NEG_D = auto()
    # Logical
    AND = auto()
    ANDI = auto()
    OR = auto()
    XOR = auto()
    NOR = auto()
    # Shifts
    SLL = auto()
    SRL = auto()
    SRA = auto()
    SLLV = auto()
    SRLV = auto()
    SRAV = auto()
    # Set
    SLT = auto()
    SLTU = auto()
    # Loads
    LW = auto()
    LH = auto()
    LHU = auto()
    LB = auto()
    LBU = auto()
    LUI = auto()
    LI = auto()
    LWC1 = auto()
    LDC1 = auto()
    # Stores
    SW = auto()
    SH = auto()
    SB = auto()
    SWC1 = auto()
    SDC1 = auto()
    # Type conversions
    CVT_S_D = auto()
    CVT_D_S = auto()
    CVT_S_W = auto()
    CVT_W_S = auto()
    CVT_D_W = auto()
    CVT_W_D = auto()
    # Moves
    MOVE = auto()
    MFHI = auto()
    MFLO = auto()
    MTHI = auto()
    MTLO = auto()
    MOVS = auto()
    MOVD = auto()
    MTC1 = auto()
    MFC1 = auto()
    # Branches
    BEQ = auto()
    BNE = auto()
    BNEZ = auto()
    BGTZ = auto()
    BLEZ = auto()
    BLTZ = auto()
    BGEZ = auto()
    BLT = auto()
    BGT = auto()
    BGE = auto()
    BLE = auto()
    C_EQ_S = auto()
    BC1T = auto()
    C_EQ_D = auto()
    BC1F = auto()
    C_LT_S = auto()
    C_LT_D = auto()
    C_LE_S = auto()
    C_LE_D = auto()
    # Jumps
    J = auto()
    JR = auto()
    JAL = auto()
    JALR = auto()
    # Address
    LA = auto()
    # System calls and pseudo instructions
    SYSCALL = auto()
    NOP = auto()
    LABEL = auto()
    # Fallback
    UNKNOWN = auto()


class MIPSInstructionType(IntEnum):
    """Operand layout of an instruction."""

    THREE_REG = 0
    TWO_REG_OFFSET = auto()
    ONE_REG_IMMEDIATE = auto()
    TWO_REG_IMMEDIATE = auto()
    TWO_REG = auto()
    ONE_REG = auto()
    JUMP_LABEL = auto()
    LABEL = auto()
    NOP = auto()


@dataclass
class MIPSInstruction:
    """One text-segment instruction; build it with the class methods."""

    opcode: MIPSOpcode
    instruction_type: MIPSInstructionType
    dest_reg: MIPSRegister | None = None
    src1_reg: MIPSRegister | None = None
    src2_reg: MIPSRegister | None = None
    immediate: str = ""
    label: str = ""

    def __post_init__(self) -> None:
        self.opcode = MIPSOpcode(self.opcode)
        self.instruction_type = MIPSInstructionType(self.instruction_type)
        self.dest_reg = _register(self.dest_reg)
        self.src1_reg = _register(self.src1_reg)
        self.src2_reg = _register(self.src2_reg)

    @classmethod
    def three_reg(cls, opcode, dest, src1, src2) -> MIPSInstruction:
        """``op rd, rs, rt``."""
        return cls(opcode, MIPSInstructionType.THREE_REG, dest, src1, src2)

    @classmethod
    def load_store(cls, opcode, reg, offset, base) -> MIPSInstruction:
        """``op rt, offset(base)``."""
        return cls(
            opcode,
            MIPSInstructionType.TWO_REG_OFFSET,
            dest_reg=reg,
            src1_reg=base,
            immediate=str(offset),
        )

    @classmethod
    def reg_immediate(cls, opcode, dest, immediate) -> MIPSInstruction:
        """``op rd, imm`` as in li, lui and la."""
        return cls(
            opcode,
            MIPSInstructionType.ONE_REG_IMMEDIATE,
            dest_reg=dest,
            immediate=str(immediate),
        )

    @classmethod
    def two_reg_immediate(cls, opcode, dest, src, immediate) -> MIPSInstruction:
        """``op rd, rs, imm`` as in addiu and andi."""
        return cls(
            opcode,
            MIPSInstructionType.TWO_REG_IMMEDIATE,
            dest_reg=dest,
            src1_reg=src,
            immediate=str(immediate),
        )

    @classmethod
    def two_reg(cls, opcode, dest, src) -> MIPSInstruction:
        """``op rd, rs`` as in move."""
        return cls(opcode, MIPSInstructionType.TWO_REG, dest_reg=dest, src1_reg=src)

    @classmethod
    def one_reg(cls, opcode, dest) -> MIPSInstruction:
        """``op rd`` as in mflo and mfhi."""
        return cls(opcode, MIPSInstructionType.ONE_REG, dest_reg=dest)

    @classmethod
    def jump(cls, opcode, target) -> MIPSInstruction:
        """``op target`` as in j and jal."""
        return cls(opcode, MIPSInstructionType.JUMP_LABEL, label=target)

    @classmethod
    def label_only(cls, label) -> MIPSInstruction:
        """A label definition with no instruction."""
        return cls(MIPSOpcode.LABEL, MIPSInstructionType.LABEL, label=label)

    @classmethod
    def standalone(cls, opcode) -> MIPSInstruction:
        """An instruction without operands, such as syscall or nop."""
        return cls(opcode, MIPSInstructionType.NOP)

    @property
    def registers(self) -> tuple[MIPSRegister, ...]:
        """The registers the instruction names, destination first."""
        return tuple(r for r in (self.dest_reg, self.src1_reg, self.src2_reg) if r is not None)


def _register(reg) -> MIPSRegister | None:
    return None if reg is None else MIPSRegister(reg)


class MIPSDirective(IntEnum):
    """Data-segment directives."""

    WORD = 0
    BYTE = auto()
    HALF = auto()
    FLOAT = auto()
    DOUBLE = auto()
    ASCIIZ = auto()
    SPACE = auto()


@dataclass
class MIPSDataInstruction:
    """One labelled entry of the data segment."""

    label: str
    directive: MIPSDirective
    value: str

    def __post_init__(self) -> None:
        self.directive = MIPSDirective(self.directive)