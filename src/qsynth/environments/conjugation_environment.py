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

from qsynth.circuit import GateOp, inverse_gates
from qsynth.environments.quantum_environments import QuantumEnvironment


class ConjugationEnvironment(QuantumEnvironment):
    r"""
    This environment can be used for performing conjugated operations.
    An arbitrary unitary :math:`U \in SU(2^n)` can be conjugated by another unitary
    :math:`V \in SU(2^n)`:

    .. math::

        \text{conj}(U,V) = V^\dagger U V

    The gates appended to the yielded buffer form $U$. When the body finishes, the
    gates of $V$, the body and the inverse of $V$ are handed to the outer sink.
    $V$ and its inverse are always emitted as a pair: if the body is empty,
    $V^\dagger V = 1$ and nothing is emitted. If the body raises, nothing is
    emitted either.

    The ConjugationEnvironment can be called using the alias ``conjugate``.

    Parameters
    ----------
    sink : GateSink
        The outer sink.
    gates : GateOp or list[GateOp]
        The gates of the conjugating unitary $V$.

    Examples
    --------

    We realize an X rotation as a Z rotation in the Hadamard basis:

    >>> from qsynth import QuantumCircuit, HGate, RZGate, conjugate
    >>> qc = QuantumCircuit(1)
    >>> qb = qc.qubits[0]
    >>> with conjugate(qc, HGate(qb)) as body:
    ...     body.append(RZGate(0.5, qb))
    >>> qc.data
    [h(Qubit(qb_1)), rz(0.5)(Qubit(qb_1)), h(Qubit(qb_1))]

    """

    def __init__(self, sink, gates):
        QuantumEnvironment.__init__(self, sink)
        if isinstance(gates, GateOp):
            gates = [gates]
        self.conjugation_gates = list(gates)

    def transform(self, gates):
        if not gates:
            return []
        return self.conjugation_gates + gates + inverse_gates(self.conjugation_gates)


def conjugate(sink, gates):
    return ConjugationEnvironment(sink, gates)
