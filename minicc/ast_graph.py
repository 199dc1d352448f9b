"""Render an abstract syntax tree as a Graphviz DOT description."""

from __future__ import annotations

from pathlib import Path

from .attr_types import BasicType
from .syntax_tree import AstNode, AstOperatorType

__all__ = ["node_name", "ast_to_dot", "output_ast"]

_OPERATOR_NAMES = {
    AstOperatorType.BLOCK: "block",
    AstOperatorType.RETURN: "return",
    AstOperatorType.FUNC_DEF: "func-def",
    AstOperatorType.COMPILE_UNIT: "compile-unit",
    AstOperatorType.FUNC_FORMAL_PARAMS: "formal-params",
    AstOperatorType.VAR_DECL: "var-decl",
    AstOperatorType.DECL_STMT: "decl-stmt",
    AstOperatorType.ADD: "+",
    AstOperatorType.SUB: "-",
    AstOperatorType.ASSIGN: "=",
    AstOperatorType.FUNC_CALL: "func-call",
    AstOperatorType.FUNC_REAL_PARAMS: "real-params",
}

_TYPE_NAMES = {
    BasicType.TYPE_INT: "i32",
    BasicType.TYPE_VOID: "void",
    BasicType.TYPE_FLOAT: "float",
}


def _as_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def node_name(node: AstNode) -> str:
    """Return the text shown for ``node`` in the graph."""
    kind = node.node_type
    if kind == AstOperatorType.LEAF_LITERAL_UINT:
        return str(_as_int32(node.integer_val))
    if kind == AstOperatorType.LEAF_LITERAL_FLOAT:
        return f"{node.float_val:f}"
    if kind == AstOperatorType.LEAF_VAR_ID:
        return node.name
    if kind == AstOperatorType.LEAF_TYPE:
        return _TYPE_NAMES.get(node.type, node.type.name.lower())
    return _OPERATOR_NAMES.get(kind, "unknown")


def _quote(text: str, record: bool = False) -> str:
    text = text.replace("\\", "\\\\").replace('"', '\\"')
    if record:
        for ch in "{}|<>":
            text = text.replace(ch, "\\" + ch)
    return f'"{text}"'


class _DotBuilder:
    def __init__(self) -> None:
        self.nodes: list[str] = []
        self.edges: list[str] = []

    def _new_id(self) -> str:
        return f"n{len(self.nodes)}"

    def visit(self, node: AstNode) -> str:
        if node.is_leaf_node():
            node_id = self._new_id()
            self.nodes.append(
                f"{node_id} [fontcolor=\"black\", fontname=\"SimSun\", "
                f"label={_quote(node_name(node), record=True)}, shape=\"record\", "
                f"style=\"filled\", fillcolor=\"yellow\"];"
            )
            return node_id

        son_ids = [self.visit(son) for son in node.sons]
        node_id = self._new_id()
        self.nodes.append(
            f"{node_id} [label={_quote(node_name(node))}, shape=\"ellipse\"];"
        )
        self.edges.extend(f"{node_id} -> {son_id};" for son_id in son_ids)
        return node_id


def ast_to_dot(root: AstNode | None) -> str:
    """Return a DOT digraph of the tree below ``root``; leaves are yellow records."""
    builder = _DotBuilder()
    if root is not None:
        builder.visit(root)
    lines = ["digraph ast {", '\tgraph [dpi="600"];']
    lines.extend("\t" + line for line in builder.nodes + builder.edges)
    lines.append("}")
    return "\n".join(lines) + "\n"


def output_ast(root: AstNode | None, file_path: str | Path) -> None:
    """Write the DOT description of the tree to ``file_path``."""
    Path(file_path).write_text(ast_to_dot(root), encoding="utf-8")