"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Sample C/C++ sources

LINKED_LIST_CPP = """\
struct Node {
    int data;
    Node* next;
};"""

SINGLE_LINE_NODE_CPP = "struct Node { int data; Node* next; };"

STACK_CPP = """\
class Stack {
    Node* top;
    int size = 0;
public:
    void push(int value) {
        size++;
    }
    int pop();
    bool empty() const { return size == 0; }
};"""

POINT_CPP = """\
struct Point {
    int x;
    int y;
};"""

# Node (linked) on lines 1-4, Stack (nested) on 6-15, Point (simple) on 17-20
MIXED_CPP = "\n\n".join([LINKED_LIST_CPP, STACK_CPP, POINT_CPP])

C_STYLE_LIST_C = """\
struct node {
    int key;
    struct node *next;
};"""

UNION_CPP = """\
union Value {
    int i;
    float f;
};"""

UNTERMINATED_CPP = """\
struct Broken {
    int x;
    Broken* next;
"""


@pytest.fixture
def linked_list_cpp() -> str:
    return LINKED_LIST_CPP


@pytest.fixture
def stack_cpp() -> str:
    return STACK_CPP


@pytest.fixture
def mixed_cpp() -> str:
    return MIXED_CPP
