"""Structural scanner: line-oriented heuristic over C/C++ source.

Recovers struct/class/union declarations with their members and methods.
This is deliberately not a grammar: templates, macros and braces inside strings
or comments are not understood. Malformed input yields fewer records, never an
exception.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from structgrid.core.records import Member, Method, StructureKind, StructureRecord

logger = logging.getLogger(__name__)

_OPEN_RE = re.compile(r"^(struct|class|union)\s+([A-Za-z_][A-Za-z0-9_]*)")

# Leading words that may precede the type token itself.
_QUALIFIERS = (
    r"(?:(?:const|volatile|static|mutable|unsigned|signed|struct|class|union|enum"
    r"|virtual|inline|explicit)\s+)*"
)
_TYPE = r"[A-Za-z_][A-Za-z0-9_:]*"
_IDENT = r"[A-Za-z_][A-Za-z0-9_]*"

_MEMBER_RE = re.compile(rf"^\s*({_QUALIFIERS}{_TYPE}(?:\s*\*+\s*|\s+))({_IDENT})\s*[;=]")
_METHOD_RE = re.compile(rf"^\s*({_QUALIFIERS}{_TYPE}(?:\s*\*+\s*|\s+))({_IDENT})\s*\(([^)]*)\)")

# Statement keywords that the type-token pattern would otherwise accept.
_NOT_A_TYPE = frozenset({
    "return", "delete", "else", "goto", "case", "throw", "new", "using", "friend",
})

# Elaborated-type keywords; a declaration needs a name after them.
_TAG_KEYWORDS = frozenset({"struct", "class", "union", "enum"})

_STATEMENT_ENDS = "{};"


@dataclass
class _OpenStructure:
    name: str
    kind: StructureKind
    start_line: int
    depth: int = 0
    members: list[Member] = field(default_factory=list)
    methods: list[Method] = field(default_factory=list)

    def close(self, end_line: int) -> StructureRecord:
        return StructureRecord(
            name=self.name,
            kind=self.kind,
            start_line=self.start_line,
            end_line=end_line,
            members=tuple(self.members),
            methods=tuple(self.methods),
        )


def scan(text: str) -> list[StructureRecord]:
    """Scan source text into StructureRecords, in order of their closing line."""
    records: list[StructureRecord] = []
    current: _OpenStructure | None = None

    for index, raw_line in enumerate(text.split("\n")):
        line_no = index + 1
        line = raw_line.strip()

        if current is None:
            match = _OPEN_RE.match(line)
            if match:
                current = _OpenStructure(
                    name=match.group(2),
                    kind=StructureKind(match.group(1)),
                    start_line=line_no,
                )

        if current is None:
            continue

        for statement, depth in _split_statements(line, current.depth):
            if depth > 0:
                _detect(statement, line, line_no, current)
        current.depth += line.count("{") - line.count("}")

        if current.depth == 0 and "}" in line:
            records.append(current.close(line_no))
            current = None

    if current is not None:
        logger.debug(
            "Dropping unterminated %s %s opened at line %d",
            current.kind.value,
            current.name,
            current.start_line,
        )

    return records


def _split_statements(line: str, depth: int) -> list[tuple[str, int]]:
    """Split a line at braces and semicolons.

    Each piece keeps its terminator and is paired with the brace depth in
    effect where it starts, so single-line bodies are seen member by member.
    """
    pieces: list[tuple[str, int]] = []
    buf: list[str] = []
    for ch in line:
        buf.append(ch)
        if ch not in _STATEMENT_ENDS:
            continue
        statement = "".join(buf).strip()
        if len(statement) > 1:
            pieces.append((statement, depth))
        buf = []
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
    rest = "".join(buf).strip()
    if rest:
        pieces.append((rest, depth))
    return pieces


def _detect(statement: str, line: str, line_no: int, current: _OpenStructure) -> None:
    """Member first, then method; a statement yields at most one of them."""
    member = _match_member(statement, line, line_no)
    if member is not None:
        current.members.append(member)
        return
    method = _match_method(statement, line, line_no)
    if method is not None:
        current.methods.append(method)


def _match_member(statement: str, line: str, line_no: int) -> Member | None:
    if "(" in line:
        return None
    match = _MEMBER_RE.match(statement)
    if not match or not _is_type(match.group(1)):
        return None
    declared_type = _normalize_type(match.group(1))
    return Member(
        name=match.group(2),
        declared_type=declared_type,
        is_pointer="*" in declared_type,
        line=line_no,
    )


def _match_method(statement: str, line: str, line_no: int) -> Method | None:
    if line.endswith(";"):
        return None
    match = _METHOD_RE.match(statement)
    if not match or not _is_type(match.group(1)):
        return None
    params = [p.strip() for p in match.group(3).split(",") if p.strip()]
    return Method(
        name=match.group(2),
        return_type=_normalize_type(match.group(1)),
        parameters=tuple(params),
        line=line_no,
    )


def _is_type(type_text: str) -> bool:
    words = type_text.replace("*", " ").split()
    if not words or words[0] in _NOT_A_TYPE:
        return False
    return words[-1] not in _TAG_KEYWORDS


def _normalize_type(type_text: str) -> str:
    """``Node *`` → ``Node*``, runs of whitespace collapsed."""
    collapsed = re.sub(r"\s+", " ", type_text.strip())
    return re.sub(r"\s*\*", "*", collapsed)
