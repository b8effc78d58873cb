"""Tests for the structural scanner."""

from tests.conftest import (
    C_STYLE_LIST_C,
    LINKED_LIST_CPP,
    MIXED_CPP,
    SINGLE_LINE_NODE_CPP,
    STACK_CPP,
    UNION_CPP,
    UNTERMINATED_CPP,
)

from structgrid.core.records import StructureKind
from structgrid.core.scanner import scan


def test_scan_empty_text():
    assert scan("") == []


def test_scan_single_line_node():
    records = scan(SINGLE_LINE_NODE_CPP)
    assert len(records) == 1
    node = records[0]
    assert node.name == "Node"
    assert node.kind is StructureKind.STRUCT
    assert node.start_line == node.end_line == 1

    data, nxt = node.members
    assert data.name == "data"
    assert data.declared_type == "int"
    assert not data.is_pointer
    assert nxt.name == "next"
    assert nxt.is_pointer
    assert "Node" in nxt.declared_type


def test_scan_multiline_linked_list():
    node = scan(LINKED_LIST_CPP)[0]
    assert (node.start_line, node.end_line) == (1, 4)
    assert [(m.name, m.declared_type, m.line) for m in node.members] == [
        ("data", "int", 2),
        ("next", "Node*", 3),
    ]
    assert node.methods == ()


def test_scan_class_members_and_methods():
    stack = scan(STACK_CPP)[0]
    assert stack.kind is StructureKind.CLASS
    assert (stack.start_line, stack.end_line) == (1, 10)
    assert [m.name for m in stack.members] == ["top", "size"]
    assert stack.members[0].is_pointer

    push, empty = stack.methods
    assert push.name == "push"
    assert push.return_type == "void"
    assert push.parameters == ("int value",)
    assert push.line == 5
    assert empty.name == "empty"
    assert empty.parameters == ()


def test_method_prototype_ending_in_semicolon_is_ignored():
    stack = scan(STACK_CPP)[0]
    assert "pop" not in [m.name for m in stack.methods]


def test_method_body_statements_are_not_members():
    stack = scan(STACK_CPP)[0]
    # "size++;" and "return size == 0;" sit inside method bodies
    assert len(stack.members) == 2


def test_scan_c_style_pointer():
    node = scan(C_STYLE_LIST_C)[0]
    nxt = node.members[1]
    assert nxt.name == "next"
    assert nxt.declared_type == "struct node*"
    assert nxt.is_pointer


def test_scan_union():
    value = scan(UNION_CPP)[0]
    assert value.kind is StructureKind.UNION
    assert [m.declared_type for m in value.members] == ["int", "float"]


def test_unterminated_structure_is_dropped():
    assert scan(UNTERMINATED_CPP) == []


def test_unterminated_after_complete_keeps_complete():
    records = scan(LINKED_LIST_CPP + "\n" + UNTERMINATED_CPP)
    assert [r.name for r in records] == ["Node"]


def test_scan_multiple_structures_in_order():
    records = scan(MIXED_CPP)
    assert [r.name for r in records] == ["Node", "Stack", "Point"]
    assert [(r.start_line, r.end_line) for r in records] == [(1, 4), (6, 15), (17, 20)]


def test_inheritance_clause():
    records = scan("class Derived : public Base {\n    int x;\n};")
    assert records[0].name == "Derived"
    assert records[0].members[0].name == "x"


def test_member_with_initializer():
    records = scan("struct Config {\n    int retries = 3;\n    const char* name = nullptr;\n};")
    retries, name = records[0].members
    assert retries.name == "retries"
    assert name.declared_type == "const char*"
    assert name.is_pointer


def test_non_structure_code_is_ignored():
    assert scan("int main() {\n    return 0;\n}\n") == []


def test_crlf_line_endings():
    records = scan(LINKED_LIST_CPP.replace("\n", "\r\n"))
    assert len(records) == 1
    assert len(records[0].members) == 2


def test_scan_is_deterministic():
    assert scan(MIXED_CPP) == scan(MIXED_CPP)


def test_to_dict_uses_wire_names():
    data = scan(SINGLE_LINE_NODE_CPP)[0].to_dict()
    assert data["kind"] == "struct"
    assert data["startLine"] == 1
    assert data["members"][1] == {
        "name": "next",
        "declaredType": "Node*",
        "isPointer": True,
        "line": 1,
    }


def test_friend_declaration_is_not_a_member():
    records = scan("class Box {\n    int w;\n    friend class Helper;\n};")
    assert [(m.name, m.declared_type) for m in records[0].members] == [("w", "int")]
    assert records[0].methods == ()


def test_nested_forward_declaration_is_not_a_member():
    records = scan("struct Outer {\n    struct Inner;\n    Inner* child;\n};")
    assert [m.name for m in records[0].members] == ["child"]


def test_unsigned_alone_is_a_type():
    records = scan("struct Counter {\n    unsigned hits;\n};")
    assert records[0].members[0].declared_type == "unsigned"
