# tacgen

Building blocks for the middle and back end of a small C compiler.

## Modules

- `tacgen.tac`: three-address code.
  - `Operand` (an `OperandType` and a string value), `OperatorType`,
    `JumpKind` (`NONE`, `GOTO`, `IF_GOTO`) and `Instruction`.
  - `TacContext` creates operands and instructions for one compilation:
    `new_temp_var()` gives `#t1`, `#t2`, ...; `new_label()` gives numbered
    labels; `new_identifier()` returns the same operand for the same name;
    `new_constant()`, `new_type()`, `new_string()` and `new_empty_var()` build
    the other operand kinds. `emit()` builds an instruction with a fresh label
    and raises `CodeSizeError` once `max_code_size` instructions (default
    1,000,000) have been emitted.
  - `is_assignment()` is true unless the instruction is a call, a parameter or
    a return; `backpatch()` sets the target of every instruction whose target
    is still empty; `merge_lists()` adds one set of instructions into another.
- `tacgen.printer`: text rendering. `format_instruction()` renders one
  instruction as `label: body` (for example `3: if a < b goto I7`,
  `5: #t1 = call f, 2`, `6: x = #t1`); `format_program()` and
  `format_code_vector()` render a list between header and footer lines,
  skipping `None` entries. Also `operand_string()`, `operator_symbol()` and
  `operator_name()` (e.g. `TAC_OPERATOR_ADD`, or `UNKNOWN_OPERATOR`).
- `tacgen.optimize`: `fix_labels()` drops jumps whose target was never
  patched and renumbers labels 1, 2, ... in order of appearance;
  `eliminate_dead_code()` makes one backward liveness pass, keeping jumps,
  calls, parameters, returns, function boundaries, dereferences, indexed
  stores, referenced labels and instructions whose results are used;
  `remove_dead_code()` repeats it until the code stops shrinking.
- `tacgen.typesys`: `PrimitiveType`, `TypeCategory`, `AccessSpecifier` and
  `MemberKind`, with `primitive_type_name()`, `primitive_type_size()` (bytes,
  0 for types without storage), `type_category_name()` and
  `access_specifier_name()`.
- `tacgen.members`: `MemberInfo` and `TypeDefinition`, which keeps the
  members of a struct, union or class in declaration order (`add_member()`,
  `lookup_member()`, `get_members_by_name()`,
  `get_member_access_specifier()`, the last raising `KeyError` for an unknown
  member).
- `tacgen.mips`: `MIPSRegister`, `MIPSOpcode`, `MIPSInstructionType`,
  `MIPSDirective`, and the records `MIPSInstruction` (built with
  `three_reg`, `load_store`, `reg_immediate`, `two_reg_immediate`, `two_reg`,
  `one_reg`, `jump`, `label_only` and `standalone`) and `MIPSDataInstruction`.

## Installation

```
pip install .
```

## Example

```python
from tacgen.tac import TacContext, OperatorType, JumpKind
from tacgen.printer import format_program
from tacgen.optimize import remove_dead_code

ctx = TacContext()
x = ctx.new_identifier("x")
t = ctx.new_temp_var()
code = [
    ctx.emit(OperatorType.ADD, t, ctx.new_constant("1"), ctx.new_constant("2"), JumpKind.NONE),
    ctx.emit(OperatorType.NOP, x, t, ctx.new_empty_var(), JumpKind.NONE),
    ctx.emit(OperatorType.RETURN, x, ctx.new_empty_var(), ctx.new_empty_var(), JumpKind.NONE),
]
code = remove_dead_code(code)
print(format_program(code))
```

## What it does not do

The package has no lexer or parser and no command: it does not read C
source, and it builds no intermediate code by itself. The MIPS module only
describes instructions and data entries; it does not allocate registers or
write assembly text.

## Running the tests

```
pip install .[test]
pytest
```