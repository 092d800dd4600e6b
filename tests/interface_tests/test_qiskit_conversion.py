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
from qiskit.quantum_info import Statevector

from qsynth import (
    GateOp,
    QuantumCircuit,
    diagonal_unitary,
    from_complex,
    multiplexed_rotation,
    prepare_arbitrary_state_cp,
    prepare_state,
)


def _compare_with_qiskit(qc):
    qiskit_sv = Statevector(qc.to_qiskit()).data
    assert np.allclose(qiskit_sv, qc.statevector_array(), atol=1e-10)


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_state_preparation(n):
    array = np.random.rand(2**n) - 0.5 + 1j * (np.random.rand(2**n) - 0.5)

    qc = prepare_state(array)

    _compare_with_qiskit(qc)


def test_controlled_state_preparation():
    array = np.random.rand(4) - 0.5 + 1j * (np.random.rand(4) - 0.5)
    qc = QuantumCircuit(4)
    controls = qc.qubits[2:]

    qc.h(controls[0])
    qc.x(controls[1])
    prepare_arbitrary_state_cp(from_complex(array), qc.qubits[:2], qc, controls=controls)

    assert qc.count_ops().get("ccgphase", 0) == 1
    _compare_with_qiskit(qc)


@pytest.mark.parametrize("axis", ["X", "Y", "Z"])
def test_outer_controlled_multiplexer(axis):
    qc = QuantumCircuit(4)
    for qb in qc.qubits:
        qc.h(qb)

    multiplexed_rotation(
        0, [0.3, -1.2], axis, qc.qubits[:1], qc.qubits[1], qc, outer_controls=qc.qubits[2:]
    )

    _compare_with_qiskit(qc)


def test_diagonal_unitary():
    qc = QuantumCircuit(3)
    for qb in qc.qubits:
        qc.h(qb)

    diagonal_unitary(0, np.random.uniform(-np.pi, np.pi, 8), qc.qubits, qc)

    _compare_with_qiskit(qc)


def test_register_names():
    qc = QuantumCircuit(2)
    qc.append(GateOp("gphase", None, [], 0.5))
    qc.append(GateOp("s_dg", qc.qubits[1], [qc.qubits[0]]))

    qiskit_qc = qc.to_qiskit()

    assert [reg.name for reg in qiskit_qc.qregs] == [qb.identifier for qb in qc.qubits]
    assert np.isclose(float(qiskit_qc.global_phase), 0.5)
    assert len(qiskit_qc.data) == 1
