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

from qsynth.alg_primitives.state_preparation.multiplexed_rotation import (
    _multiplexed_rotation,
    check_distinct,
    pad_angles,
    resolve_qubits,
    sum_difference_transform,
)
from qsynth.circuit import Axis, GPhaseGate
from qsynth.environments import control, invert
from qsynth.misc.exceptions import InvalidArgument
from qsynth.misc.utility import check_tolerance


def diagonal_unitary(tolerance, angles, qubits, qc, adjoint=False, controls=()):
    r"""
    Applies the diagonal unitary

    .. math::

        \ket{j} \rightarrow e^{i \, \text{angles}[j]} \ket{j}

    to the (little-endian) register ``qubits``.

    The phases are peeled off qubit by qubit starting at the most significant one:
    the difference part of the angle vector is realized as a multiplexed Z rotation
    targeting that qubit, the sum part is processed recursively on the remaining
    qubits. The last remaining sum is applied as global phase.

    Parameters
    ----------
    tolerance : float
        Rotations and phases with absolute angle at most ``tolerance`` are elided.
    angles : array-like
        The phases. Shorter vectors are zero-padded to ``2**len(qubits)``.
    qubits : list[Qubit]
        The register.
    qc : GateSink
        The sink receiving the gates.
    adjoint : bool, optional
        If set to True, the inverse circuit is emitted. The default is False.
    controls : list[Qubit], optional
        Control qubits for the whole operation. The default is ().

    Raises
    ------
    InvalidArgument
        Empty register, negative tolerance, too many angles or qubits which are
        not part of ``qc``.

    Examples
    --------

    We apply a CZ gate, i.e. the phase $\pi$ on the state $\ket{11}$:

    >>> import numpy as np
    >>> from qsynth import QuantumCircuit, diagonal_unitary
    >>> qc = QuantumCircuit(2)
    >>> diagonal_unitary(0, [0, 0, 0, np.pi], qc.qubits, qc)
    >>> qc.count_ops()
    {'rz': 3, 'cx': 2, 'gphase': 1}

    """
    check_tolerance(tolerance)
    qubits = resolve_qubits(qc, qubits)
    controls = resolve_qubits(qc, controls)

    if not qubits:
        raise InvalidArgument("Tried to apply diagonal unitary on empty register")

    check_distinct(qubits + controls)
    angles = pad_angles(angles, len(qubits))

    with control(qc, controls) as sink:
        if adjoint:
            with invert(sink) as buffer:
                _diagonal_unitary(tolerance, angles, qubits, buffer)
        else:
            _diagonal_unitary(tolerance, angles, qubits, sink)


def _diagonal_unitary(tolerance, angles, qubits, sink):
    even, odd = sum_difference_transform(angles)

    # The target picks up exp(i*odd) in |0> and exp(-i*odd) in |1>, i.e. RZ(-2*odd)
    _multiplexed_rotation(tolerance, -2 * odd, Axis.Z, qubits[:-1], qubits[-1], sink, [])

    if len(qubits) == 1:
        if abs(even[0]) > tolerance:
            sink.append(GPhaseGate(even[0]))
    else:
        _diagonal_unitary(tolerance, even, qubits[:-1], sink)
