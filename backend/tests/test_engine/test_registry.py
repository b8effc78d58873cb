"""Tests for the stage registry."""

import pytest

from structgrid.engine.context import AnalysisContext
from structgrid.engine.registry import Stage, StageRegistry, StageSpec


def _noop(ctx: AnalysisContext) -> None:
    pass


def test_register_counts_stages():
    reg = StageRegistry()
    spec = StageSpec(id="S0.01", stage=Stage.SCANNING, fn=_noop)
    reg.register(spec)
    assert reg.resolve_order() == [spec]
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = StageRegistry()
    reg.register(StageSpec(id="S0.01", stage=Stage.SCANNING, fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(StageSpec(id="S0.01", stage=Stage.SCANNING, fn=_noop))


def test_resolve_order_with_deps():
    reg = StageRegistry()
    s1 = StageSpec(id="S0.01", stage=Stage.SCANNING, fn=_noop)
    s2 = StageSpec(id="S2.01", stage=Stage.MAPPING, fn=_noop, dependencies=["S0.01"])
    s3 = StageSpec(id="S1.01", stage=Stage.CLASSIFICATION, fn=_noop, dependencies=["S2.01"])
    reg.register(s3)
    reg.register(s2)
    reg.register(s1)
    ids = [s.id for s in reg.resolve_order()]
    assert ids == ["S0.01", "S2.01", "S1.01"]


def test_resolve_order_all():
    reg = StageRegistry()
    for i in range(5):
        reg.register(StageSpec(id=f"S0.0{i+1}", stage=Stage.SCANNING, fn=_noop))
    assert len(reg.resolve_order()) == 5


def test_resolve_order_detects_cycles():
    reg = StageRegistry()
    reg.register(StageSpec(id="S1.01", stage=Stage.CLASSIFICATION, fn=_noop, dependencies=["S1.02"]))
    reg.register(StageSpec(id="S1.02", stage=Stage.CLASSIFICATION, fn=_noop, dependencies=["S1.01"]))
    with pytest.raises(ValueError, match="Circular"):
        reg.resolve_order()
