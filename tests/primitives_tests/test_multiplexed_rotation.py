"""
********************************************************************************
* Copyright (c) 2025 the Qrisp authors
*
* This program and the accompanying materials are made available under the
* terms of the Eclipse Public License 2.0 which is available at
* http://www.eclipse.org/legal/epl-2.0.
*
* This Source Code may also be made available under the following Secondary
* Licenses when the conditions for such availability set forth in the Eclipse
* Public License, v. 2.0 are satisfied: GNU General Public License, version 2
* with the GNU Classpath Exception which is
* available at https://www.gnu.org/software/classpath/license.html.
*
* SPDX-License-Identifier: EPL-2.0 OR GPL-2.0 WITH Classpath-exception-2.0
********************************************************************************
"""

import importlib
from unittest.mock import patch

import numpy as np
import pytest

from qsynth import (
    Axis,
    GateList,
    GPhaseGate,
    InvalidArgument,
    QuantumCircuit,
    Qubit,
    multiplexed_rotation,
    op_unitary,
    sum_difference_transform,
)

mr_module = importlib.import_module(
    "qsynth.alg_primitives.state_preparation.multiplexed_rotation"
)


def _expected_unitary(angles, axis, num_controls, num_outer=0):
    """
    Matrix of the multiplexed rotation on the register controls + [target] + outer.
    """
    axis = Axis(axis)
    dim = 2 ** (num_controls + 1 + num_outer)
    outer_offset = (2**num_outer - 1) << (num_controls + 1)

    res = np.eye(dim, dtype=np.complex128)
    for j in range(2**num_controls):
        if axis is Axis.I:
            rotation = np.exp(-0.5j * angles[j]) * np.eye(2)
        else:
            rotation = op_unitary(axis.rotation_kind, angles[j])

        for t in range(2):
            for s in range(2):
                row = j + (t << num_controls) + outer_offset
                column = j + (s << num_controls) + outer_offset
                res[row, column] = rotation[t, s]

    return res


def _register(num_controls, num_outer=0):
    qc = QuantumCircuit(num_controls + 1 + num_outer)
    controls = qc.qubits[:num_controls]
    target = qc.qubits[num_controls]
    outer_controls = qc.qubits[num_controls + 1 :]
    return qc, controls, target, outer_controls


def test_sum_difference_transform():
    even, odd = sum_difference_transform(np.array([1.0, 2.0, 5.0, 10.0]))
    assert np.allclose(even, [3, 6])
    assert np.allclose(odd, [-2, -4])


@pytest.mark.parametrize("axis", ["X", "Y", "Z"])
@pytest.mark.parametrize("num_controls", [0, 1, 2, 3])
def test_multiplexed_rotation(axis, num_controls, unitary_of):
    angles = np.random.uniform(-np.pi, np.pi, 2**num_controls)
    qc, controls, target, _ = _register(num_controls)

    multiplexed_rotation(0, angles, axis, controls, target, qc)

    assert np.allclose(
        unitary_of(qc.data, qc.qubits),
        _expected_unitary(angles, axis, num_controls),
        atol=1e-10,
    )


def test_gate_structure():
    qc, controls, target, _ = _register(1)

    multiplexed_rotation(0, [0.5, 1.5], "Y", controls, target, qc)

    assert [gate.name for gate in qc.data] == [
        "s_dg", "h", "rz", "x", "rz", "x", "h", "s"
    ]
    assert qc.count_ops() == {"s_dg": 1, "h": 2, "rz": 2, "cx": 2, "s": 1}
    assert np.allclose([gate.angle for gate in qc.data if gate.name == "rz"], [1, -0.5])


def test_identity_axis(unitary_of):
    qc, _, target, _ = _register(0)

    multiplexed_rotation(0, [0.8], Axis.I, [], target, qc)

    assert qc.data == [GPhaseGate(-0.4)]
    assert np.allclose(unitary_of(qc.data, qc.qubits), _expected_unitary([0.8], "I", 0))


@pytest.mark.parametrize("axis", ["X", "Y", "Z", "I"])
@pytest.mark.parametrize("num_controls", [0, 1, 2])
@pytest.mark.parametrize("num_outer", [1, 2])
def test_outer_controls(axis, num_controls, num_outer, unitary_of):
    if axis == "I" and num_controls:
        pytest.skip("I rotations can not be multiplexed")

    angles = np.random.uniform(-np.pi, np.pi, 2**num_controls)
    qc, controls, target, outer_controls = _register(num_controls, num_outer)

    multiplexed_rotation(0, angles, axis, controls, target, qc, outer_controls)

    assert np.allclose(
        unitary_of(qc.data, qc.qubits),
        _expected_unitary(angles, axis, num_controls, num_outer),
        atol=1e-10,
    )


@pytest.mark.parametrize("axis", ["X", "Y", "Z"])
def test_adjoint(axis, unitary_of):
    angles = np.random.uniform(-np.pi, np.pi, 4)
    qc, controls, target, _ = _register(2)

    multiplexed_rotation(0, angles, axis, controls, target, qc, adjoint=True)

    assert np.allclose(
        unitary_of(qc.data, qc.qubits),
        _expected_unitary(angles, axis, 2).conj().T,
        atol=1e-10,
    )


def test_padding(unitary_of):
    qc, controls, target, _ = _register(2)

    multiplexed_rotation(0, [0.3, -0.2], "Z", controls, target, qc)

    assert np.allclose(
        unitary_of(qc.data, qc.qubits),
        _expected_unitary([0.3, -0.2, 0, 0], "Z", 2),
    )


def test_generic_sink():
    qc, controls, target, _ = _register(1)
    gates = GateList()

    multiplexed_rotation(0, [0.5, 1.5], "X", controls, target, gates)
    multiplexed_rotation(0, [0.5, 1.5], "X", controls, target, qc)

    assert list(gates) == qc.data


class TestTolerance:

    @pytest.mark.parametrize("num_controls", [0, 1, 2, 3, 4])
    def test_zero_angles_full_recursion(self, num_controls):
        qc, controls, target, _ = _register(num_controls)

        with patch.object(mr_module, "_multiplex_z", wraps=mr_module._multiplex_z) as spy:
            multiplexed_rotation(0, np.zeros(2**num_controls), "Z", controls, target, qc)

        assert spy.call_count == 2 ** (num_controls + 1) - 1
        assert qc.data == []

    @pytest.mark.parametrize("num_controls", [0, 1, 2, 3, 4])
    def test_zero_angles_pruned(self, num_controls):
        qc, controls, target, _ = _register(num_controls)

        with patch.object(mr_module, "_multiplex_z", wraps=mr_module._multiplex_z) as spy:
            multiplexed_rotation(1e-3, np.zeros(2**num_controls), "Y", controls, target, qc)

        # Only the chain of sum vectors is visited
        assert spy.call_count == num_controls + 1
        assert qc.data == []

    def test_small_angles_are_elided(self):
        qc, controls, target, _ = _register(1)

        multiplexed_rotation(0.1, [1.0, 1.05], "Z", controls, target, qc)

        # The difference part (-0.025) is below the tolerance
        assert qc.count_ops() == {"rz": 1}
        assert np.isclose(qc.data[0].angle, 1.025)


class TestErrors:

    def test_negative_tolerance(self):
        qc, controls, target, _ = _register(1)
        with pytest.raises(InvalidArgument, match="non-negative"):
            multiplexed_rotation(-0.1, [0.5, 1.5], "Z", controls, target, qc)
        assert qc.data == []

    def test_too_many_angles(self):
        qc, controls, target, _ = _register(1)
        with pytest.raises(InvalidArgument, match="Tried to multiplex 3 angles"):
            multiplexed_rotation(0, [0.5, 1.5, 2.5], "Z", controls, target, qc)

    def test_multiplexed_identity(self):
        qc, controls, target, _ = _register(1)
        with pytest.raises(InvalidArgument, match="can not be controlled"):
            multiplexed_rotation(0, [0.5, 1.5], "I", controls, target, qc)

    def test_overlapping_qubits(self):
        qc, controls, target, _ = _register(1)
        with pytest.raises(InvalidArgument, match="are not distinct"):
            multiplexed_rotation(0, [0.5, 1.5], "Z", controls, target, qc, [target])

    def test_foreign_qubit(self):
        qc, controls, target, _ = _register(1)

        with pytest.raises(InvalidArgument, match="is not part of circuit"):
            multiplexed_rotation(0, [0.5, 1.5], "Z", [Qubit("foreign")], target, qc)
        assert qc.data == []

        with pytest.raises(InvalidArgument, match="is not part of circuit"):
            multiplexed_rotation(
                0, [0.5, 1.5], "X", controls, target, qc, [Qubit("foreign")]
            )
        assert qc.data == []

        with pytest.raises(InvalidArgument, match="out of range"):
            multiplexed_rotation(0, [0.5, 1.5], "Z", [5], target, qc)
        assert qc.data == []

    def test_integer_indices_need_circuit(self):
        gates = GateList()
        with pytest.raises(InvalidArgument, match="as Qubit"):
            multiplexed_rotation(0, [0.5, 1.5], "Z", [0], Qubit("t"), gates)
        assert list(gates) == []

    def test_unknown_axis(self):
        qc, controls, target, _ = _register(0)
        with pytest.raises(ValueError):
            multiplexed_rotation(0, [0.5], "W", controls, target, qc)


def test_integer_indices(unitary_of):
    angles = [0.4, -1.1]
    qc = _register(1)[0]

    multiplexed_rotation(0, angles, "Y", [0], 1, qc)

    assert np.allclose(unitary_of(qc.data, qc.qubits), _expected_unitary(angles, "Y", 1))
