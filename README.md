# minicc

Building blocks for a compiler of a small subset of C that targets 32-bit ARM
assembly: syntax tree construction, a Graphviz DOT view of the tree, and
helpers for emitting ARM32 assembly.

## Modules

### `minicc.attr_types`

The records a lexer hands to a parser. All of them are frozen dataclasses.

- `BasicType`: an `IntEnum` with `TYPE_NONE`, `TYPE_VOID`, `TYPE_INT`,
  `TYPE_FLOAT` and `TYPE_MAX`.
- `DigitIntAttr(val, lineno)`, `DigitRealAttr(val, lineno)`,
  `VarIdAttr(id, lineno)` and `TypeAttr(type, lineno)`.

### `minicc.syntax_tree`

- `AstOperatorType`: the node kinds. The leaf kinds are `LEAF_LITERAL_UINT`,
  `LEAF_LITERAL_FLOAT`, `LEAF_VAR_ID` and `LEAF_TYPE`. The internal kinds
  include `COMPILE_UNIT`, `FUNC_DEF`, `FUNC_CALL`, `BLOCK` (also available as
  `COMPOUNDSTMT`), `RETURN`, `ASSIGN`, `DECL_STMT`, `VAR_DECL`, `ADD` and
  `SUB`.
- `AstNode(node_type, type=BasicType.TYPE_VOID, line_no=-1)`. It has the
  attributes `sons` and `parent`, `name`, `integer_val`, `float_val`, `type`
  and `line_no`.
  - `is_leaf_node()` tells whether the node is a leaf.
  - `insert_son_node(node)` appends a child and ignores `None`.
  - The class methods `new(node_type, *children)`, `from_int_literal(attr)`,
    `from_var_id(attr)`, `from_id(name, line_no)` and `from_type(type)`
    create nodes. In `new`, a `None` ends the list of children.
    `from_int_literal` keeps the value as an unsigned 32-bit number.
- Builder functions:
  - `create_contain_node` creates an internal node with up to three children.
  - `create_func_def` and `create_func_def_from_attrs` give the function
    node the children type, name, formal parameters and block. An empty
    parameter list and an empty block are created when none is given.
  - `create_func_call` gives the call node the children name and real
    parameters.
  - `type_attr_to_type` maps int to int and every other type to void.
  - `create_type_node`, `create_var_decl_node`, `create_var_decl_stmt_node`,
    `create_var_decl_stmt_from_attrs` and `add_var_decl_node` build types and
    declarations.

### `minicc.ast_graph`

- `node_name(node)` gives the label shown for a node. A literal shows its
  value, with integers shown as signed 32-bit numbers. An identifier shows its
  name. A type shows `i32`, `void` or `float`. Operators show names such as
  `func-def` or `+`. Any other node shows `unknown`.
- `ast_to_dot(root)` returns a DOT `digraph`. Leaves are drawn as yellow
  record boxes and internal nodes as ellipses, with an edge from each parent
  to each of its children in order.
- `output_ast(root, file_path)` writes that DOT text to `file_path`.

### `minicc.arm32_platform`

- `REG_NAMES` lists the names of registers r0–r15 (`fp`, `ip`, `sp`, `lr` and
  `pc` for r11–r15).
- `TMP_REG_NO`, `FP_REG_NO`, `SP_REG_NO` and `LX_REG_NO` are register numbers.
  `MAX_REG_NUM` and `MAX_USABLE_REG_NUM` are register counts.
- `const_expr(num)` is true when `num` or `-num` is an 8-bit value rotated by
  an even amount, that is, a data-processing immediate.
- `is_disp(num)` is true for load/store offsets strictly between −4096 and
  4096.
- `is_reg(name)` is true for a register name.

### `minicc.iloc`

- `ArmInst` is one instruction, label or comment. `render()` returns its text,
  or an empty string when the instruction is dead or has no opcode.
  `replace(...)` overwrites its fields and `set_dead()` marks it dead.
- `ILocArm32` is an instruction list. It can be iterated and has a length.
  Its methods:
  - `label`, `inst(op, rs, *args)`, `comment`, `nop` and `jump` add plain
    entries. `inst` takes at most two sources and raises `ValueError` for
    more.
  - `call_fun` adds a call (`bl`) and `mov_reg` a register move.
  - `load_imm` uses `movw`, and also `movt` when the upper 16 bits are set.
  - `load_symbol` loads the address of a symbol.
  - `load_base` and `store_base` load and store at a base register plus an
    offset. Offsets that are out of range first go into a register.
  - `lea_stack` computes an address from a base register and an offset.
  - `alloc_stack(frame_size, tmp_reg_no)` sets `fp` to `sp` and subtracts the
    frame size from `sp`. It adds nothing when the size is 0.
  - `to_str(num, flag=True)` formats a number, with a leading `#` when `flag`
    is true.
  - `delete_unused_label()` marks dead any `.`-prefixed label that no live
    branch targets.
  - `output(file, output_empty=False)` writes the instructions to `file`.
    Labels are not indented and every other line is indented with a tab.

### `minicc.register_allocator`

`SimpleRegisterAllocator` hands out registers r0–r10. A value can be any
object with a `load_reg_id` attribute, where `-1` means the value holds no
register.

- `allocate(var=None, no=-1)` returns the register `var` already holds, or
  `no` if that register is free, or else the lowest free register. When no
  register is free, it spills the value that has held a register longest and
  reuses that register. It raises `RuntimeError` when nothing can be spilled.
- `reserve(no)` takes a register and spills whatever value holds it.
- `free(var)` and `free_reg(no)` release a register.
- `occupied`, `used` and `values` report the current state.

A register number outside r0–r10 raises `IndexError`.

### `minicc.codegen`

- `CodeGenerator` is the abstract base of code generators.
  `run(out_file_name="")` calls `generate()` with `self.fp` set to the
  opened file, or to standard output when the name is empty. A file that
  cannot be opened raises `OSError`.
- `CodeGeneratorAsm` is the abstract base of assembly generators. Its
  `generate()` calls `gen_header()`, then `gen_data_section()`, then
  `gen_code_section()`. `gen_code_section()` resets `label_index` to 0 and
  calls `gen_function_code(func)` for every item of `module.functions` whose
  `is_builtin` is false. Subclasses supply `gen_header`, `gen_data_section`,
  `gen_function_code` and `register_allocation`.

### `minicc.frontend`

`FrontEndExecutor(filename)` is the abstract base of parsers. A subclass's
`run()` parses the file, stores the tree in `ast_root` and reports success.

## What the package does not do

- It has no lexer, no parser and no command-line program. `FrontEndExecutor`
  and the code generator classes are abstract bases only.
- It has no intermediate representation, no symbol table and no concrete
  ARM32 code generator. `ILocArm32` builds instruction text from register
  numbers, offsets and names, not from program values.
- `output_ast` writes DOT text whatever extension the file has. It does not
  render images.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import sys

from minicc.attr_types import BasicType, TypeAttr, VarIdAttr
from minicc.syntax_tree import create_func_def_from_attrs
from minicc.ast_graph import ast_to_dot
from minicc.iloc import ILocArm32

func = create_func_def_from_attrs(
    TypeAttr(BasicType.TYPE_INT, 1), VarIdAttr("main", 1), None, None
)
print(ast_to_dot(func))

iloc = ILocArm32()
iloc.load_imm(0, 70000)
iloc.inst("bx", "lr")
iloc.output(sys.stdout)
```