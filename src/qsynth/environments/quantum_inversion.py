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

from qsynth.circuit import controlled_gates, inverse_gates
from qsynth.environments.quantum_environments import QuantumEnvironment


# Environment inheritor where the environment content is appended as the inverse
class InversionEnvironment(QuantumEnvironment):
    """
    This environment can be used to invert (i.e. "dagger") a block of gates.
    The gates appended to the yielded buffer are handed to the outer sink in
    reversed order, each gate daggered.

    An alias for this is ``invert``.

    Examples
    --------

    >>> from qsynth import QuantumCircuit, RYGate, SGate, invert
    >>> qc = QuantumCircuit(1)
    >>> with invert(qc) as buffer:
    ...     buffer.append(RYGate(0.5, qc.qubits[0]))
    ...     buffer.append(SGate(qc.qubits[0]))
    >>> qc.data
    [s_dg(Qubit(qb_1)), ry(-0.5)(Qubit(qb_1))]

    """

    def transform(self, gates):
        return inverse_gates(gates)


class ControlEnvironment(QuantumEnvironment):
    """
    This environment adds the given control Qubits to every gate appended to the
    yielded buffer before handing it to the outer sink.

    An alias for this is ``control``.

    Parameters
    ----------
    sink : GateSink
        The outer sink.
    controls : Qubit or list[Qubit]
        The control Qubits.

    """

    def __init__(self, sink, controls):
        QuantumEnvironment.__init__(self, sink)
        if not isinstance(controls, (list, tuple)):
            controls = [controls]
        self.controls = list(controls)

    def transform(self, gates):
        return controlled_gates(gates, self.controls)


def invert(sink):
    return InversionEnvironment(sink)


def control(sink, controls):
    return ControlEnvironment(sink, controls)
