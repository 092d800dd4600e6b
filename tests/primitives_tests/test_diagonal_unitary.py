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

import numpy as np
import pytest

from qsynth import GPhaseGate, InvalidArgument, QuantumCircuit, Qubit, diagonal_unitary


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_diagonal_unitary(n, unitary_of):
    angles = np.random.uniform(-np.pi, np.pi, 2**n)
    qc = QuantumCircuit(n)

    diagonal_unitary(0, angles, qc.qubits, qc)

    assert np.allclose(
        unitary_of(qc.data, qc.qubits), np.diag(np.exp(1j * angles)), atol=1e-10
    )


def test_cz():
    qc = QuantumCircuit(2)

    diagonal_unitary(0, [0, 0, 0, np.pi], qc.qubits, qc)

    assert qc.count_ops() == {"rz": 3, "cx": 2, "gphase": 1}


def test_constant_phase():
    qc = QuantumCircuit(3)

    diagonal_unitary(0, [0.7] * 8, qc.qubits, qc)

    assert len(qc.data) == 1
    assert qc.data[0].name == "gphase"
    assert np.isclose(qc.data[0].angle, 0.7)


def test_adjoint(unitary_of):
    angles = np.random.uniform(-np.pi, np.pi, 4)
    qc = QuantumCircuit(2)

    diagonal_unitary(0, angles, qc.qubits, qc, adjoint=True)

    assert np.allclose(unitary_of(qc.data, qc.qubits), np.diag(np.exp(-1j * angles)))


def test_controlled(unitary_of):
    angles = np.random.uniform(-np.pi, np.pi, 4)
    qc = QuantumCircuit(3)
    register, ctrl = qc.qubits[:2], qc.qubits[2]

    diagonal_unitary(0, angles, register, qc, controls=[ctrl])

    expected = np.diag(np.concatenate([np.ones(4), np.exp(1j * angles)]))
    assert np.allclose(unitary_of(qc.data, qc.qubits), expected, atol=1e-10)
    assert all(ctrl in gate.controls for gate in qc.data)


def test_padding(unitary_of):
    qc = QuantumCircuit(2)

    diagonal_unitary(0, [0.1, 0.2], qc.qubits, qc)

    assert np.allclose(
        unitary_of(qc.data, qc.qubits), np.diag(np.exp(1j * np.array([0.1, 0.2, 0, 0])))
    )


def test_tolerance():
    qc = QuantumCircuit(1)
    diagonal_unitary(0.1, [0.05, 0.01], qc.qubits, qc)
    assert qc.data == []

    qc = QuantumCircuit(1)
    diagonal_unitary(0.1, [0.5, 0.5], qc.qubits, qc)
    assert qc.data == [GPhaseGate(0.5)]


def test_errors():
    qc = QuantumCircuit(2)

    with pytest.raises(InvalidArgument, match="empty register"):
        diagonal_unitary(0, [0.5], [], qc)

    with pytest.raises(InvalidArgument, match="non-negative"):
        diagonal_unitary(-1, [0.5], qc.qubits, qc)

    with pytest.raises(InvalidArgument, match="Tried to multiplex 5 angles"):
        diagonal_unitary(0, np.ones(5), qc.qubits, qc)

    with pytest.raises(InvalidArgument, match="is not part of circuit"):
        diagonal_unitary(0, [0.1, 0.2, 0.3, 0.4], [qc.qubits[0], Qubit("foreign")], qc)

    with pytest.raises(InvalidArgument, match="is not part of circuit"):
        diagonal_unitary(0, [0.1, 0.2], qc.qubits[:1], qc, controls=[Qubit("foreign")])

    assert qc.data == []
