import pytest

from minicc.frontend import FrontEndExecutor
from minicc.syntax_tree import AstNode, AstOperatorType


class _StubFrontEnd(FrontEndExecutor):
    def run(self):
        with open(self.filename, encoding="utf-8") as source:
            text = source.read()
        if not text.strip():
            return False
        self.ast_root = AstNode(AstOperatorType.COMPILE_UNIT)
        return True


def test_root_empty_before_run(tmp_path):
    executor = _StubFrontEnd(str(tmp_path / "x.c"))
    assert executor.ast_root is None
    assert executor.filename == str(tmp_path / "x.c")
    executor.ast_root = AstNode(AstOperatorType.COMPILE_UNIT)
    FrontEndExecutor.__init__(executor, str(tmp_path / "y.c"))
    assert executor.ast_root is None
    assert executor.filename == str(tmp_path / "y.c")


def test_run_sets_root(tmp_path):
    path = tmp_path / "prog.c"
    path.write_text("int main(){return 0;}", encoding="utf-8")
    executor = _StubFrontEnd(str(path))
    assert executor.run() is True
    assert executor.ast_root.node_type == AstOperatorType.COMPILE_UNIT
    child = AstNode.from_id("main", 1)
    assert executor.ast_root.insert_son_node(child).sons == [child]
    assert child.parent is executor.ast_root


def test_failed_run_leaves_root_empty(tmp_path):
    path = tmp_path / "empty.c"
    path.write_text("", encoding="utf-8")
    executor = _StubFrontEnd(str(path))
    assert executor.run() is False
    assert executor.ast_root is None
    previous = AstNode(AstOperatorType.COMPILE_UNIT)
    executor.ast_root = previous
    assert executor.run() is False
    assert executor.ast_root is previous


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        FrontEndExecutor("a.c")