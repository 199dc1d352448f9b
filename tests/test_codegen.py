from dataclasses import dataclass, field

import pytest

from minicc.codegen import CodeGenerator, CodeGeneratorAsm


@dataclass
class _Func:
    name: str
    is_builtin: bool = False


@dataclass
class _Module:
    functions: list = field(default_factory=list)


class _Asm(CodeGeneratorAsm):
    def __init__(self, module):
        super().__init__(module)
        self.allocated = []

    def gen_header(self):
        self.fp.write("HEADER\n")

    def gen_data_section(self):
        self.fp.write("DATA\n")

    def register_allocation(self, func):
        self.allocated.append(func.name)

    def gen_function_code(self, func):
        self.register_allocation(func)
        self.fp.write(f"{func.name}:{self.label_index}\n")
        self.label_index += 1


def test_run_writes_sections_in_order(tmp_path):
    module = _Module([_Func("main"), _Func("putint", True), _Func("f")])
    gen = _Asm(module)
    out = tmp_path / "out.s"
    assert CodeGenerator.run(gen, str(out)) is True
    assert out.read_text(encoding="utf-8").splitlines() == [
        "HEADER",
        "DATA",
        "main:0",
        "f:1",
    ]
    assert gen.allocated == ["main", "f"]
    assert gen.fp is None


def test_label_index_restarts_each_run(tmp_path):
    gen = _Asm(_Module([_Func("main")]))
    CodeGenerator.run(gen, str(tmp_path / "a.s"))
    CodeGenerator.run(gen, str(tmp_path / "b.s"))
    assert (tmp_path / "b.s").read_text(encoding="utf-8").splitlines()[-1] == "main:0"


def test_empty_name_writes_stdout(capsys):
    gen = _Asm(_Module([_Func("main")]))
    assert CodeGenerator.run(gen, "") is True
    assert capsys.readouterr().out == "HEADER\nDATA\nmain:0\n"


def test_unopenable_file_raises(tmp_path):
    gen = _Asm(_Module())
    with pytest.raises(OSError):
        CodeGenerator.run(gen, str(tmp_path / "missing" / "out.s"))


def test_abstract_classes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        CodeGenerator(_Module())
    with pytest.raises(TypeError):
        CodeGeneratorAsm(_Module())


def test_show_linear_ir_defaults_off(tmp_path):
    gen = _Asm(_Module([_Func("main")]))
    assert gen.show_linear_ir is False
    gen.show_linear_ir = True
    assert CodeGenerator.run(gen, str(tmp_path / "out.s")) is True
    assert gen.show_linear_ir is True