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

from qsynth import QuantumCircuit, Qubit


def circuit_unitary(gates, qubits):
    """Computes the matrix of a gate sequence column by column."""

    columns = []
    for j in range(2 ** len(qubits)):
        qc = QuantumCircuit()
        for qb in qubits:
            qc.add_qubit(qb)

        # Prepare the basis state |j>
        for i, qb in enumerate(qubits):
            if (j >> i) & 1:
                qc.x(qb)

        for gate in gates:
            qc.append(gate)

        columns.append(qc.statevector_array())

    return np.array(columns).T


@pytest.fixture
def unitary_of():
    return circuit_unitary


@pytest.fixture
def make_qubits():
    def make(n, prefix="q"):
        return [Qubit(f"{prefix}_{i}") for i in range(n)]

    return make
