import ast

import pytest

from pyprettier.ast import (
    AstArguments,
    AstAssign,
    AstAugAssign,
    AstCall,
    AstClassDef,
    AstCompare,
    AstDict,
    AstExpr,
    AstFor,
    AstFunctionDef,
    AstKeyword,
    AstName,
    AstNameConstant,
    AstNum,
    AstOperator,
    AstStr,
    AstTuple,
    AstUnsupported,
    OperatorKind,
    lower_node,
    node_kind,
    parse_to_ast,
)
from tests._debug import debug_dump_ast


def _single_statement(source: str):
    module = parse_to_ast(source)
    assert len(module.body) == 1
    debug_dump_ast(source, module)
    return module.body[0]


def test_function_def_shape() -> None:
    statement = _single_statement("def f(a, b=1, *args, c, d=2, **kwargs):\n    print(a)\n")

    assert isinstance(statement, AstFunctionDef)
    assert statement.name == "f"
    arguments = statement.args
    assert isinstance(arguments, AstArguments)
    assert [arg.arg for arg in arguments.args] == ["a", "b"]
    assert [arg.col_offset for arg in arguments.args] == [6, 9]
    assert arguments.defaults == (AstNum(1, col_offset=11),)
    assert arguments.vararg is not None and arguments.vararg.arg == "args"
    assert [arg.arg for arg in arguments.kwonlyargs] == ["c", "d"]
    assert arguments.kwarg is not None and arguments.kwarg.arg == "kwargs"
    assert isinstance(statement.body[0], AstExpr)


def test_keyword_only_defaults_drop_missing_entries() -> None:
    statement = _single_statement("def f(*, a, b=2, c):\n    print(a)\n")

    assert isinstance(statement, AstFunctionDef)
    assert [node.n for node in statement.args.kw_defaults if isinstance(node, AstNum)] == [2]
    assert len(statement.args.kw_defaults) == 1


def test_positional_only_parameters() -> None:
    statement = _single_statement("def f(a, /, b):\n    print(a)\n")

    assert isinstance(statement, AstFunctionDef)
    assert [arg.arg for arg in statement.args.posonlyargs] == ["a"]
    assert [arg.arg for arg in statement.args.args] == ["b"]


@pytest.mark.parametrize(
    ("source", "detail"),
    [
        ("def f(a: int):\n    print(a)\n", "parameter annotations"),
        ("def f(*args: int, **kwargs: str):\n    print(args)\n", "parameter annotations"),
        ("def f(a) -> str:\n    print(a)\n", "return annotation"),
    ],
)
def test_annotations_lower_to_unsupported(source: str, detail: str) -> None:
    statement = _single_statement(source)

    assert statement == AstUnsupported("FunctionDef", detail, col_offset=0)


def test_offsets_follow_source_order_across_lines() -> None:
    statement = _single_statement("def f(\n    a=1,\n    b=2\n):\n    print(a)\n")

    assert isinstance(statement, AstFunctionDef)
    # "def f(\n" is 7 bytes and "    a=1,\n" is 9.
    assert [arg.col_offset for arg in statement.args.args] == [11, 20]
    assert [node.col_offset for node in statement.args.defaults] == [13, 22]


def test_offsets_count_utf8_bytes() -> None:
    module = parse_to_ast('s = "é"\nt = 1\n')
    second = module.body[1]

    assert isinstance(second, AstAssign)
    assert second.targets[0].col_offset == len('s = "é"\n'.encode("utf-8"))


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ('"text"', AstStr("text", col_offset=0)),
        ("42", AstNum(42, col_offset=0)),
        ("1.5", AstNum(1.5, col_offset=0)),
        ("True", AstNameConstant(True, col_offset=0)),
        ("None", AstNameConstant(None, col_offset=0)),
    ],
)
def test_constant_lowering(source: str, expected) -> None:
    statement = _single_statement(f"{source}\n")

    assert isinstance(statement, AstExpr)
    assert statement.value == expected


def test_bool_constant_is_not_a_number() -> None:
    statement = _single_statement("False\n")

    assert isinstance(statement, AstExpr)
    assert isinstance(statement.value, AstNameConstant)
    assert statement.value.value is False


@pytest.mark.parametrize(
    ("source", "kind", "detail"),
    [
        ("b'raw'\n", "Constant", "bytes"),
        ("...\n", "Constant", "ellipsis"),
        ("x = a + b\n", "Assign", None),
        ("@decorator\ndef f():\n    print(1)\n", "FunctionDef", "decorators"),
        ("class A(metaclass=M):\n    x = 1\n", "ClassDef", "class keywords"),
        ("d = {**other}\n", "Assign", None),
        ("while x:\n    print(x)\n", "While", None),
    ],
)
def test_unsupported_constructs_are_retained_by_kind(source: str, kind: str, detail: str | None) -> None:
    statement = _single_statement(source)

    if isinstance(statement, AstExpr):
        statement = statement.value
    assert node_kind(statement) == kind
    if isinstance(statement, AstUnsupported):
        assert statement.detail == detail


def test_binary_operation_lowers_to_unsupported() -> None:
    statement = _single_statement("x = a + b\n")

    assert isinstance(statement, AstAssign)
    assert statement.value == AstUnsupported("BinOp", col_offset=4)


def test_dictionary_unpacking_lowers_to_unsupported() -> None:
    statement = _single_statement("d = {**other}\n")

    assert isinstance(statement, AstAssign)
    assert isinstance(statement.value, AstUnsupported)
    assert statement.value.detail == "dictionary unpacking"


def test_operators_lower_to_tags() -> None:
    augmented = _single_statement("x <<= 2\n")
    compare = _single_statement("a == b != c\n")

    assert isinstance(augmented, AstAugAssign)
    assert augmented.op == AstOperator(OperatorKind.L_SHIFT)
    assert isinstance(compare, AstExpr)
    assert isinstance(compare.value, AstCompare)
    assert compare.value.ops == (AstOperator(OperatorKind.EQ), AstOperator(OperatorKind.NOT_EQ))


def test_membership_operator_is_unsupported() -> None:
    statement = _single_statement("a in b\n")

    assert isinstance(statement, AstExpr)
    assert isinstance(statement.value, AstCompare)
    assert statement.value.ops == (AstUnsupported("In"),)


def test_call_keywords() -> None:
    statement = _single_statement("f(1, key=2, **rest)\n")

    assert isinstance(statement, AstExpr)
    call = statement.value
    assert isinstance(call, AstCall)
    assert call.func == AstName("f", col_offset=0)
    assert [keyword.arg for keyword in call.keywords] == ["key", None]
    assert all(isinstance(keyword, AstKeyword) for keyword in call.keywords)


def test_for_else_and_tuple_target() -> None:
    statement = _single_statement("for k, v in items:\n    print(k)\nelse:\n    print(v)\n")

    assert isinstance(statement, AstFor)
    assert isinstance(statement.target, AstTuple)
    assert len(statement.orelse) == 1


def test_class_and_dict_shapes() -> None:
    class_def = _single_statement("class A(B):\n    d = {1: 2}\n")

    assert isinstance(class_def, AstClassDef)
    assert class_def.bases == (AstName("B", col_offset=8),)
    assign = class_def.body[0]
    assert isinstance(assign, AstAssign)
    assert isinstance(assign.value, AstDict)
    # Second line: "class A(B):\n" is 12 bytes.
    assert assign.value.keys == (AstNum(1, col_offset=21),)


def test_lower_node_accepts_raw_ast() -> None:
    assert lower_node(ast.Name(id="x", col_offset=3)) == AstName("x", col_offset=3)


def test_node_kind_names_match_parser_classes() -> None:
    assert node_kind(AstName("x")) == "Name"
    assert node_kind(AstArguments()) == "arguments"
    assert node_kind(AstKeyword(arg="a", value=AstName("b"))) == "keyword"
    assert node_kind(AstOperator(OperatorKind.POW)) == "Pow"
