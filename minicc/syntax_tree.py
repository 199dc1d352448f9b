"""Abstract syntax tree nodes and the helpers the parsers build them with."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from .attr_types import BasicType, DigitIntAttr, TypeAttr, VarIdAttr

__all__ = [
    "AstOperatorType",
    "AstNode",
    "create_contain_node",
    "create_func_def",
    "create_func_def_from_attrs",
    "create_func_call",
    "type_attr_to_type",
    "create_type_node",
    "create_var_decl_node",
    "create_var_decl_stmt_node",
    "create_var_decl_stmt_from_attrs",
    "add_var_decl_node",
]


class AstOperatorType(IntEnum):
    """Kinds of AST node."""

    # Leaves
    LEAF_LITERAL_UINT = 0
    LEAF_LITERAL_FLOAT = 1
    LEAF_VAR_ID = 2
    LEAF_TYPE = 3

    # Internal nodes
    COMPILE_UNIT = 4
    FUNC_DEF = 5
    FUNC_FORMAL_PARAMS = 6
    FUNC_FORMAL_PARAM = 7
    FUNC_CALL = 8
    FUNC_REAL_PARAMS = 9
    BLOCK = 10
    COMPOUNDSTMT = 10  # alias of BLOCK
    RETURN = 11
    ASSIGN = 12
    DECL_STMT = 13
    VAR_DECL = 14
    ADD = 15
    SUB = 16

    MAX = 17
    """Marks an invalid operator."""


_LEAF_TYPES = frozenset(
    {
        AstOperatorType.LEAF_LITERAL_UINT,
        AstOperatorType.LEAF_LITERAL_FLOAT,
        AstOperatorType.LEAF_VAR_ID,
        AstOperatorType.LEAF_TYPE,
    }
)


class AstNode:
    """A node of the abstract syntax tree."""

    def __init__(
        self,
        node_type: AstOperatorType,
        type: BasicType = BasicType.TYPE_VOID,
        line_no: int = -1,
    ) -> None:
        self.node_type = node_type
        self.type = type
        self.line_no = line_no
        self.integer_val = 0
        self.float_val = 0.0
        self.name = ""
        self.parent: AstNode | None = None
        self.sons: list[AstNode] = []
        self.block_insts: list[Any] = []
        self.val: Any = None
        self.need_scope = True

    def __repr__(self) -> str:
        return (
            f"AstNode({self.node_type.name}, type={self.type.name}, "
            f"line_no={self.line_no}, name={self.name!r}, sons={len(self.sons)})"
        )

    def is_leaf_node(self) -> bool:
        """Return True for literal, identifier and type leaves."""
        return self.node_type in _LEAF_TYPES

    def insert_son_node(self, node: AstNode | None) -> AstNode:
        """Append ``node`` as the last child; ``None`` is ignored. Returns self."""
        if node is not None:
            node.parent = self
            self.sons.append(node)
        return self

    @classmethod
    def new(cls, node_type: AstOperatorType, *args: AstNode | None) -> AstNode:
        """Create a node with the given children; a ``None`` ends the child list."""
        parent = cls(node_type)
        for child in args:
            if child is None:
                break
            parent.insert_son_node(child)
        return parent

    @classmethod
    def from_int_literal(cls, attr: DigitIntAttr) -> AstNode:
        """Create an unsigned integer literal leaf."""
        node = cls(AstOperatorType.LEAF_LITERAL_UINT, BasicType.TYPE_INT, attr.lineno)
        node.integer_val = attr.val & 0xFFFFFFFF
        return node

    @classmethod
    def from_var_id(cls, attr: VarIdAttr) -> AstNode:
        """Create an identifier leaf from a lexer attribute."""
        return cls.from_id(attr.id, attr.lineno)

    @classmethod
    def from_id(cls, name: str, line_no: int) -> AstNode:
        """Create an identifier leaf."""
        node = cls(AstOperatorType.LEAF_VAR_ID, BasicType.TYPE_VOID, line_no)
        node.name = name
        return node

    @classmethod
    def from_type(cls, type: BasicType) -> AstNode:
        """Create a type leaf."""
        return cls(AstOperatorType.LEAF_TYPE, type, -1)


def create_contain_node(
    node_type: AstOperatorType,
    first_child: AstNode | None = None,
    second_child: AstNode | None = None,
    third_child: AstNode | None = None,
) -> AstNode:
    """Create an internal node with up to three children, skipping ``None``."""
    node = AstNode(node_type)
    for child in (first_child, second_child, third_child):
        node.insert_son_node(child)
    return node


def create_func_def(
    type_node: AstNode,
    name_node: AstNode,
    block_node: AstNode | None = None,
    params_node: AstNode | None = None,
) -> AstNode:
    """Create a function definition with type, name, params and body children."""
    node = AstNode(AstOperatorType.FUNC_DEF, type_node.type, name_node.line_no)
    node.name = name_node.name

    if params_node is None:
        params_node = AstNode(AstOperatorType.FUNC_FORMAL_PARAMS)
    if block_node is None:
        block_node = AstNode(AstOperatorType.BLOCK)

    node.insert_son_node(type_node)
    node.insert_son_node(name_node)
    node.insert_son_node(params_node)
    node.insert_son_node(block_node)
    return node


def create_func_def_from_attrs(
    type_attr: TypeAttr,
    id_attr: VarIdAttr,
    block_node: AstNode | None = None,
    params_node: AstNode | None = None,
) -> AstNode:
    """Create a function definition from lexer attributes."""
    type_node = create_type_node(type_attr)
    id_node = AstNode.from_id(id_attr.id, id_attr.lineno)
    return create_func_def(type_node, id_node, block_node, params_node)


def create_func_call(
    funcname_node: AstNode, params_node: AstNode | None = None
) -> AstNode:
    """Create a function call node with name and real-parameter children."""
    node = AstNode(AstOperatorType.FUNC_CALL)
    node.name = funcname_node.name

    if params_node is None:
        params_node = AstNode(AstOperatorType.FUNC_REAL_PARAMS)

    node.insert_son_node(funcname_node)
    node.insert_son_node(params_node)
    return node


def type_attr_to_type(attr: TypeAttr) -> BasicType:
    """Map a type attribute to a value type: int stays int, anything else is void."""
    if attr.type == BasicType.TYPE_INT:
        return BasicType.TYPE_INT
    return BasicType.TYPE_VOID


def create_type_node(attr: TypeAttr) -> AstNode:
    """Create a type leaf from a type attribute."""
    return AstNode.from_type(type_attr_to_type(attr))


def create_var_decl_node(type: BasicType, id_attr: VarIdAttr) -> AstNode:
    """Create a single variable declaration with type and name children."""
    type_node = AstNode.from_type(type)
    id_node = AstNode.from_id(id_attr.id, id_attr.lineno)
    decl_node = create_contain_node(AstOperatorType.VAR_DECL, type_node, id_node)
    decl_node.type = type
    return decl_node


def create_var_decl_stmt_node(first_child: AstNode | None = None) -> AstNode:
    """Create a declaration statement, optionally holding a first declaration."""
    stmt_node = create_contain_node(AstOperatorType.DECL_STMT)
    if first_child is not None:
        stmt_node.type = first_child.type
        stmt_node.insert_son_node(first_child)
    return stmt_node


def create_var_decl_stmt_from_attrs(type_attr: TypeAttr, id_attr: VarIdAttr) -> AstNode:
    """Create a declaration statement holding one declaration built from attributes."""
    decl_node = create_var_decl_node(type_attr_to_type(type_attr), id_attr)
    stmt_node = create_contain_node(AstOperatorType.DECL_STMT)
    stmt_node.type = decl_node.type
    stmt_node.insert_son_node(decl_node)
    return stmt_node


def add_var_decl_node(stmt_node: AstNode, id_attr: VarIdAttr) -> AstNode:
    """Append a declaration of the statement's type to a declaration statement."""
    decl_node = create_var_decl_node(stmt_node.type, id_attr)
    stmt_node.insert_son_node(decl_node)
    return stmt_node