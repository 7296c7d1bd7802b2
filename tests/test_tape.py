import numpy as np
import pytest

from wengert import Tape, TapeConfig, TapeError
from wengert.core.node import Edge


def test_leaf_has_no_parents():
    tape = Tape()
    x = tape.variable(2.0)
    node = tape.nodes[x.index]
    assert node.parents == (None, None)
    assert node.is_leaf
    assert node.op == "var"


def test_indices_follow_creation_order():
    tape = Tape()
    assert tape.push() == 0
    assert tape.push((0, 2.0)) == 1
    assert tape.push((0, 1.0), (1, -1.0)) == 2
    assert tape.length() == 3
    assert len(tape) == 3


def test_push_encodes_parent_slots():
    tape = Tape()
    tape.push()
    tape.push((0, 2.0), op="sin")
    tape.push(None, (1, 3.0), op="mul")
    assert tape.nodes[1].parents == (Edge(0, 2.0), None)
    assert tape.nodes[2].parents == (None, Edge(1, 3.0))
    assert tape.nodes[2].op == "mul"
    assert list(tape.nodes[2].edges()) == [Edge(1, 3.0)]


def test_push_rejects_forward_references():
    tape = Tape()
    tape.push()
    with pytest.raises(TapeError):
        tape.push((1, 1.0))
    with pytest.raises(TapeError):
        tape.push((0, 1.0), (5, 1.0))
    assert tape.length() == 1


def test_push_rejects_more_than_two_parents():
    tape = Tape()
    tape.push()
    with pytest.raises(TapeError):
        tape.push((0, 1.0), (0, 1.0), (0, 1.0))


def test_length_grows_by_one_per_operation():
    tape = Tape()
    x = tape.variable(0.5)
    assert tape.length() == 1
    y = tape.variable(4.2)
    assert tape.length() == 2
    xy = x * y
    assert tape.length() == 3
    s = x.sin()
    assert tape.length() == 4
    z = xy + s
    assert tape.length() == 5
    _ = -z
    assert tape.length() == 6
    _ = 2.0 * z
    assert tape.length() == 7
    _ = z / 3
    assert tape.length() == 8


def test_mixed_operations_do_not_reference_other_nodes():
    tape = Tape()
    x = tape.variable(2.0)
    a = x + 1
    b = 1 - x
    c = -x
    assert tape.nodes[a.index].parents == (Edge(0, 1.0), None)
    assert tape.nodes[b.index].parents == (None, Edge(0, -1.0))
    assert tape.nodes[c.index].parents == (None, Edge(0, -1.0))
    assert tape.nodes[c.index].op == "neg"


def test_clear_resets_length_and_bumps_generation():
    tape = Tape()
    x = tape.variable(1.0)
    _ = x * x
    assert tape.length() == 2
    tape.clear()
    assert tape.length() == 0
    assert tape.generation == x.generation + 1
    y = tape.variable(3.0)
    assert y.index == 0


def test_config_overrides():
    tape = Tape(TapeConfig(name="residuals"), check_handles=False)
    assert tape.config.name == "residuals"
    assert tape.config.check_handles is False
    assert "residuals" in repr(tape)


def test_config_rejects_non_floating_dtype():
    with pytest.raises(TypeError):
        TapeConfig(dtype=int)
    with pytest.raises(TypeError):
        Tape(dtype=np.int64)


def test_partials_stored_in_tape_dtype():
    tape = Tape(dtype=np.float32)
    x = tape.variable(2.0)
    y = x * 3
    assert x.value.dtype == np.float32
    assert y.value.dtype == np.float32
    assert isinstance(tape.nodes[y.index].parents[0].partial, np.float32)


def test_variable_rejects_non_numeric_values():
    tape = Tape()
    with pytest.raises(TypeError):
        tape.variable("1.0")
    with pytest.raises(TypeError):
        tape.variable([1.0, 2.0])
    with pytest.raises(TypeError):
        tape.variable(True)
    assert tape.length() == 0
