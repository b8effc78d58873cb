"""Tests for the in-memory analysis store."""

import pytest

from structgrid.core.grid import default_grid
from structgrid.core.scanner import scan
from structgrid.core.simulator import StepSimulator
from structgrid.core.steps import build_steps
from structgrid.store.memory import AnalysisStore, PlaybackSession
from tests.conftest import LINKED_LIST_CPP


@pytest.fixture
def store() -> AnalysisStore:
    return AnalysisStore()


def test_file_ids_increment(store):
    a = store.create_file("a.cpp", "struct A {};")
    b = store.create_file("b.cpp", "")
    assert (a.id, b.id) == (1, 2)
    assert a.size == len("struct A {};")
    assert a.uploaded_at


def test_file_size_counts_utf8_bytes(store):
    assert store.create_file("u.cpp", "// é").size == 5


def test_unknown_ids_raise_key_error(store):
    with pytest.raises(KeyError):
        store.get_file(1)
    with pytest.raises(KeyError):
        store.delete_file(1)
    with pytest.raises(KeyError):
        store.get_analysis(1)
    with pytest.raises(KeyError):
        store.latest_analysis_for_file(1)
    with pytest.raises(KeyError):
        store.get_session(1)


def test_latest_analysis_for_file(store):
    store.create_analysis({"n": 1}, file_id=3)
    store.create_analysis({"n": 2}, file_id=4)
    store.create_analysis({"n": 3}, file_id=3)
    assert store.latest_analysis_for_file(3).result == {"n": 3}


def test_analysis_with_errors_is_failed(store):
    record = store.create_analysis({}, errors={"S0.01": "boom"})
    assert record.status == "failed"


def test_session_roundtrip(store):
    steps = build_steps(scan(LINKED_LIST_CPP))
    sim = StepSimulator(len(steps))
    store.save_session(PlaybackSession(analysis_id=1, simulator=sim, state=sim.start(default_grid()), steps=steps))

    session = store.update_state(1, sim.forward(store.get_session(1).state))
    assert session.state.step == 1
    assert session.description == "Declare member data of type int"


def test_clear_resets_ids(store):
    store.create_file("a.cpp", "")
    store.clear()
    assert store.list_files() == []
    assert store.create_file("b.cpp", "").id == 1
