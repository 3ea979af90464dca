import pytest

from tacgen.mips import (
    MIPSDataInstruction,
    MIPSDirective,
    MIPSInstruction,
    MIPSInstructionType,
    MIPSOpcode,
    MIPSRegister,
)


def test_register_order_follows_declaration():
    first = MIPSInstruction.one_reg(MIPSOpcode.MFHI, 0)
    assert first.dest_reg is MIPSRegister.ZERO
    last = MIPSInstruction.one_reg(MIPSOpcode.MFC1, len(MIPSRegister) - 1)
    assert last.dest_reg is MIPSRegister.F31
    assert MIPSRegister.AT < MIPSRegister.V0 < MIPSRegister.T0 < MIPSRegister.S0
    assert MIPSRegister.LO < MIPSRegister.F0 < MIPSRegister.F31


def test_float_registers_flagged():
    instr = MIPSInstruction.two_reg(MIPSOpcode.MFC1, MIPSRegister.T0, MIPSRegister.F0)
    assert instr.src1_reg.is_float
    assert not instr.dest_reg.is_float
    movs = MIPSInstruction.two_reg(MIPSOpcode.MOVS, MIPSRegister.F31, MIPSRegister.F2)
    assert movs.dest_reg.is_float
    lo = MIPSInstruction.one_reg(MIPSOpcode.MTLO, MIPSRegister.LO)
    assert not lo.dest_reg.is_float


def test_opcode_order_and_fallback():
    assert MIPSInstruction.standalone(0).opcode is MIPSOpcode.ADD
    assert MIPSInstruction.standalone(len(MIPSOpcode) - 1).opcode is MIPSOpcode.UNKNOWN
    assert MIPSOpcode.SYSCALL < MIPSOpcode.NOP < MIPSOpcode.LABEL


def test_three_reg():
    instr = MIPSInstruction.three_reg(MIPSOpcode.ADD, MIPSRegister.T0, MIPSRegister.T1, MIPSRegister.T2)
    assert instr.instruction_type is MIPSInstructionType.THREE_REG
    assert instr.opcode is MIPSOpcode.ADD
    assert instr.registers == (MIPSRegister.T0, MIPSRegister.T1, MIPSRegister.T2)
    assert instr.immediate == ""


def test_load_store_keeps_offset_and_base():
    instr = MIPSInstruction.load_store(MIPSOpcode.LW, MIPSRegister.T0, "-8", MIPSRegister.FP)
    assert instr.instruction_type is MIPSInstructionType.TWO_REG_OFFSET
    assert instr.dest_reg is MIPSRegister.T0
    assert instr.src1_reg is MIPSRegister.FP
    assert instr.src2_reg is None
    assert instr.immediate == "-8"


def test_reg_immediate():
    instr = MIPSInstruction.reg_immediate(MIPSOpcode.LI, MIPSRegister.V0, "10")
    assert instr.instruction_type is MIPSInstructionType.ONE_REG_IMMEDIATE
    assert instr.registers == (MIPSRegister.V0,)
    assert instr.immediate == "10"


def test_two_reg_immediate():
    instr = MIPSInstruction.two_reg_immediate(MIPSOpcode.ADDIU, MIPSRegister.SP, MIPSRegister.SP, "-4")
    assert instr.instruction_type is MIPSInstructionType.TWO_REG_IMMEDIATE
    assert instr.registers == (MIPSRegister.SP, MIPSRegister.SP)
    assert instr.immediate == "-4"


def test_two_reg_and_one_reg():
    move = MIPSInstruction.two_reg(MIPSOpcode.MOVE, MIPSRegister.A0, MIPSRegister.T3)
    assert move.instruction_type is MIPSInstructionType.TWO_REG
    assert move.registers == (MIPSRegister.A0, MIPSRegister.T3)

    mflo = MIPSInstruction.one_reg(MIPSOpcode.MFLO, MIPSRegister.T4)
    assert mflo.instruction_type is MIPSInstructionType.ONE_REG
    assert mflo.registers == (MIPSRegister.T4,)


def test_jump_and_label():
    jal = MIPSInstruction.jump(MIPSOpcode.JAL, "main")
    assert jal.instruction_type is MIPSInstructionType.JUMP_LABEL
    assert jal.label == "main"
    assert jal.registers == ()

    lbl = MIPSInstruction.label_only("loop")
    assert lbl.opcode is MIPSOpcode.LABEL
    assert lbl.instruction_type is MIPSInstructionType.LABEL
    assert lbl.label == "loop"


def test_standalone():
    instr = MIPSInstruction.standalone(MIPSOpcode.SYSCALL)
    assert instr.instruction_type is MIPSInstructionType.NOP
    assert instr.opcode is MIPSOpcode.SYSCALL
    assert instr.registers == ()


def test_integer_values_are_coerced_to_enums():
    instr = MIPSInstruction.two_reg(int(MIPSOpcode.MOVS), int(MIPSRegister.F2), int(MIPSRegister.F4))
    assert instr.opcode is MIPSOpcode.MOVS
    assert instr.dest_reg is MIPSRegister.F2
    assert instr.src1_reg is MIPSRegister.F4


def test_invalid_opcode_rejected():
    with pytest.raises(ValueError):
        MIPSInstruction.standalone(len(MIPSOpcode) + 5)


def test_invalid_register_rejected():
    with pytest.raises(ValueError):
        MIPSInstruction.one_reg(MIPSOpcode.MFHI, -1)


def test_data_instruction():
    data = MIPSDataInstruction("str0", MIPSDirective.ASCIIZ, '"Hello %d\\n"')
    assert data.label == "str0"
    assert data.directive is MIPSDirective.ASCIIZ
    assert data.value == '"Hello %d\\n"'


def test_data_directive_coerced_and_validated():
    data = MIPSDataInstruction("x", int(MIPSDirective.WORD), "1")
    assert data.directive is MIPSDirective.WORD
    with pytest.raises(ValueError):
        MIPSDataInstruction("y", len(MIPSDirective) + 1, "0")