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

from qsynth.circuit import (
    Axis,
    CXGate,
    GateOp,
    GPhaseGate,
    QuantumCircuit,
    Qubit,
    RZGate,
    XGate,
)
from qsynth.environments import conjugate, invert
from qsynth.misc.exceptions import InvalidArgument
from qsynth.misc.utility import any_outside_tolerance, check_tolerance


def sum_difference_transform(angles):
    """
    Splits an angle vector of length $2m$ into the vectors

    ``even[i] = (angles[i] + angles[i+m])/2`` and
    ``odd[i] = (angles[i] - angles[i+m])/2``.

    Parameters
    ----------
    angles : numpy.ndarray
        The angle vector.

    Returns
    -------
    even : numpy.ndarray
    odd : numpy.ndarray

    """
    m = len(angles) // 2
    return (angles[:m] + angles[m:]) / 2, (angles[:m] - angles[m:]) / 2


def pad_angles(angles, num_controls):
    """
    Returns ``angles`` as float array of length ``2**num_controls`` (zero padded at the
    tail). Raises InvalidArgument if there are more angles than control states.
    """
    angles = np.asarray(angles, dtype=np.float64).ravel()
    size = 2**num_controls
    if len(angles) > size:
        raise InvalidArgument(
            f"Tried to multiplex {len(angles)} angles over {num_controls} control "
            f"qubits (at most {size} are possible)"
        )
    return np.concatenate([angles, np.zeros(size - len(angles))])


def check_distinct(qubits):
    if len(set(qubits)) != len(qubits):
        raise InvalidArgument(f"Qubits {qubits} are not distinct")


def resolve_qubits(qc, qubits):
    """
    Returns ``qubits`` as a list of Qubits. If ``qc`` is a QuantumCircuit, integers
    are interpreted as indices into ``qc.qubits`` and every Qubit has to be part of
    ``qc``. Raises InvalidArgument otherwise, before anything reaches the sink.
    """
    is_circuit = isinstance(qc, QuantumCircuit)

    res = []
    for qb in qubits:
        if is_circuit and isinstance(qb, (int, np.integer)):
            if not -len(qc.qubits) <= qb < len(qc.qubits):
                raise InvalidArgument(
                    f"Qubit index {qb} is out of range for circuit {qc.name}"
                )
            qb = qc.qubits[qb]

        if not isinstance(qb, Qubit):
            raise InvalidArgument(f"Could not interpret {qb} of type {type(qb)} as Qubit")

        if is_circuit and qb not in qc.qubits:
            raise InvalidArgument(f"Qubit {qb} is not part of circuit {qc.name}")

        res.append(qb)

    return res


def multiplexed_rotation(
    tolerance, angles, axis, controls, target, qc, outer_controls=(), adjoint=False
):
    r"""
    Applies a multiplexed (uniformly controlled) rotation: if the control qubits
    encode the (little-endian) integer $j$, the rotation
    $R_P(\text{angles}[j]) = \exp(-i \, \text{angles}[j] P/2)$ is applied to the
    target.

    The rotation is decomposed recursively via the sum/difference transform of the
    angle vector into unconditioned Z rotations and CX gates. Subtrees of the
    decomposition whose angles are all below ``tolerance`` are skipped and leaf
    rotations with an absolute angle of at most ``tolerance`` are elided. At
    tolerance 0 the decomposition is exact.

    Parameters
    ----------
    tolerance : float
        The pruning threshold. Must be non-negative.
    angles : array-like
        The angle vector. Shorter vectors are zero-padded to ``2**len(controls)``.
    axis : Axis or str
        The rotation axis. ``I`` is only possible without ``controls``.
    controls : list[Qubit or int]
        The control qubits, least significant first.
    target : Qubit or int
        The target qubit.
    qc : GateSink
        The sink receiving the gates.
    outer_controls : list[Qubit or int], optional
        Additional control qubits. The rotation only takes place if all of them are
        in the $\ket{1}$ state. The default is ().
    adjoint : bool, optional
        If set to True, the inverse circuit is emitted. The default is False.

    Raises
    ------
    InvalidArgument
        Negative tolerance, too many angles, an I axis with controls,
        overlapping qubit arguments or qubits which are not part of ``qc``.

    Examples
    --------

    We apply $R_Y(0.5)$ if the control is in the $\ket{0}$ state and $R_Y(1.5)$
    otherwise:

    >>> from qsynth import QuantumCircuit, multiplexed_rotation
    >>> qc = QuantumCircuit(2)
    >>> multiplexed_rotation(0, [0.5, 1.5], "Y", [qc.qubits[0]], qc.qubits[1], qc)
    >>> qc.count_ops()
    {'s_dg': 1, 'h': 2, 'rz': 2, 'cx': 2, 's': 1}

    """
    check_tolerance(tolerance)
    axis = Axis(axis)
    controls = resolve_qubits(qc, controls)
    outer_controls = resolve_qubits(qc, outer_controls)
    target = resolve_qubits(qc, [target])[0]

    if axis is Axis.I and controls:
        raise InvalidArgument("Multiplexed rotations about I can not be controlled")

    check_distinct(controls + outer_controls + [target])
    angles = pad_angles(angles, len(controls))

    if adjoint:
        with invert(qc) as buffer:
            _multiplexed_rotation(
                tolerance, angles, axis, controls, target, buffer, outer_controls
            )
    else:
        _multiplexed_rotation(
            tolerance, angles, axis, controls, target, qc, outer_controls
        )


def _multiplexed_rotation(tolerance, angles, axis, controls, target, sink, outer_controls):
    basis_change = axis.basis_change

    if basis_change is not None:
        kind, reduced_axis = basis_change
        with conjugate(sink, GateOp(kind, target)) as body:
            _multiplexed_rotation(
                tolerance, angles, reduced_axis, controls, target, body, outer_controls
            )
        return

    if axis is Axis.I:
        if abs(angles[0]) > tolerance:
            sink.append(GPhaseGate(-angles[0] / 2, outer_controls))
        return

    if not outer_controls:
        _multiplex_z(tolerance, angles, controls, target, sink)
        return

    # The outer controls act as one additional (most significant) control whose
    # zero-state angles vanish
    even, odd = sum_difference_transform(np.concatenate([np.zeros(len(angles)), angles]))

    _multiplex_z(tolerance, even, controls, target, sink)

    if any_outside_tolerance(tolerance, odd):
        with conjugate(sink, XGate(target, outer_controls)) as body:
            _multiplex_z(tolerance, odd, controls, target, body)


def _multiplex_z(tolerance, angles, controls, target, sink):
    if not controls:
        if abs(angles[0]) > tolerance:
            sink.append(RZGate(angles[0], target))
        return

    even, odd = sum_difference_transform(angles)

    _multiplex_z(tolerance, even, controls[:-1], target, sink)

    if any_outside_tolerance(tolerance, odd):
        with conjugate(sink, CXGate(controls[-1], target)) as body:
            _multiplex_z(tolerance, odd, controls[:-1], target, body)
