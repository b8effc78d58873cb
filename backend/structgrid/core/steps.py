"""Execution steps: flatten structures into a line-ordered playback script."""

from __future__ import annotations

from collections.abc import Sequence

from structgrid.core.records import ExecutionStep, StepKind, StructureRecord


def build_steps(records: Sequence[StructureRecord]) -> list[ExecutionStep]:
    """One definition step, one per member, one per method and one end step per structure.

    Sorted by source line; ties keep scan order.
    """
    steps: list[ExecutionStep] = []
    for record in records:
        kind = record.kind.value
        steps.append(ExecutionStep(record.start_line, f"Define {kind} {record.name}", StepKind.DEFINITION))
        for member in record.members:
            steps.append(ExecutionStep(
                member.line,
                f"Declare member {member.name} of type {member.declared_type}",
                StepKind.MEMBER,
            ))
        for method in record.methods:
            steps.append(ExecutionStep(method.line, f"Define method {method.name}", StepKind.METHOD))
        steps.append(ExecutionStep(record.end_line, f"End {kind} {record.name}", StepKind.END))

    return sorted(steps, key=lambda s: s.source_line)
