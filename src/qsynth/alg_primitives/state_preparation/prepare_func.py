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

import warnings

import numpy as np

from qsynth.alg_primitives.state_preparation.bloch_angles import disentangling_angles
from qsynth.alg_primitives.state_preparation.coefficients import (
    from_complex,
    from_real,
    pad,
    polar_arrays,
)
from qsynth.alg_primitives.state_preparation.multiplexed_rotation import (
    _multiplexed_rotation,
    check_distinct,
    resolve_qubits,
)
from qsynth.circuit import Axis, GPhaseGate, QuantumCircuit, Qubit
from qsynth.environments import control, invert
from qsynth.misc.exceptions import InvalidArgument
from qsynth.misc.utility import any_outside_tolerance, check_tolerance


def unprepare_arbitrary_state(tolerance, coefficients, control_qubits, target, qc):
    r"""
    Maps the state described by ``coefficients`` to (a multiple of) the all-zero
    state. This is the canonical recursion behind every preparation routine, which
    simply emits the inverse.

    In each recursion level the ``target`` qubit is disentangled: for every state of
    the control qubits, a Z rotation aligns the phases and a Y rotation moves the
    whole weight into the $\ket{0}$ state of the target. The merged, half-length
    coefficient vector is then processed with the first control as the new target.
    Finally, the phase of the remaining amplitude is removed with a global phase
    gate.

    Parameters
    ----------
    tolerance : float
        The approximation tolerance.
    coefficients : list[Amplitude]
        The coefficient vector, of length ``2**(len(control_qubits)+1)``. Index bit 0
        refers to ``target``, bit i+1 to ``control_qubits[i]``.
    control_qubits : list[Qubit]
        The control qubits.
    target : Qubit
        The target qubit.
    qc : GateSink
        The sink receiving the gates.

    """
    check_tolerance(tolerance)
    control_qubits = resolve_qubits(qc, control_qubits)
    target = resolve_qubits(qc, [target])[0]
    check_distinct(control_qubits + [target])

    coefficients = pad(coefficients, 2 ** (len(control_qubits) + 1))
    magnitudes, phases = polar_arrays(coefficients)

    _unprepare(tolerance, magnitudes, phases, control_qubits, target, qc)


def _unprepare(tolerance, magnitudes, phases, control_qubits, target, sink):
    merged_magnitudes, merged_phases, phis, thetas = disentangling_angles(
        magnitudes, phases
    )

    # Undo R_Z(phi) R_Y(theta), hence the negated angles
    if any_outside_tolerance(tolerance, phis):
        _multiplexed_rotation(tolerance, -phis, Axis.Z, control_qubits, target, sink, [])

    if any_outside_tolerance(tolerance, thetas):
        _multiplexed_rotation(
            tolerance, -thetas, Axis.Y, control_qubits, target, sink, []
        )

    if not control_qubits:
        phase = merged_phases[0]
        if abs(phase) > tolerance:
            sink.append(GPhaseGate(-phase))

    elif np.any(np.abs(merged_magnitudes) > tolerance):
        _unprepare(
            tolerance,
            merged_magnitudes,
            merged_phases,
            control_qubits[1:],
            control_qubits[0],
            sink,
        )


def approximately_prepare_arbitrary_state_cp(
    tolerance, coefficients, qubits, qc=None, adjoint=False, controls=()
):
    r"""
    Prepares the state

    .. math::

        \ket{0} \rightarrow \frac{1}{\|c\|} \sum_{j} r_j e^{i t_j} \ket{j}

    up to the approximation ``tolerance``, using the recursive disentangling scheme
    of Shende, Bullock and Markov (`arXiv:quant-ph/0406176
    <https://arxiv.org/abs/quant-ph/0406176>`_). The phase of the prepared state
    matches the target exactly (not only up to a global phase).

    Parameters
    ----------
    tolerance : float
        Rotations with absolute angle below ``tolerance`` are elided. At 0 the
        preparation is exact.
    coefficients : list[Amplitude]
        The amplitudes $(r_j, t_j)$ in polar form. Shorter vectors are zero-padded
        to ``2**len(qubits)``.
    qubits : list[Qubit or int]
        The register, least significant qubit first. Assumed to be in the all-zero
        state.
    qc : GateSink, optional
        The sink receiving the gates. If given None, a new :ref:`QuantumCircuit`
        containing ``qubits`` and ``controls`` is created.
    adjoint : bool, optional
        If set to True, the inverse circuit (mapping the state back to the all-zero
        state) is emitted. The default is False.
    controls : list[Qubit], optional
        Control qubits for the whole preparation. The default is ().

    Raises
    ------
    InvalidArgument
        Negative tolerance, empty register, more coefficients than basis states or
        qubits which are not part of ``qc``.

    Returns
    -------
    qc : GateSink
        The sink.

    Examples
    --------

    We prepare $(\ket{0} + i\ket{3})/\sqrt{2}$:

    >>> import numpy as np
    >>> from qsynth import Qubit, approximately_prepare_arbitrary_state_cp
    >>> qc = approximately_prepare_arbitrary_state_cp(
    ...     0.0, [(1, 0), (0, 0), (0, 0), (1, np.pi/2)], [Qubit("a"), Qubit("b")]
    ... )
    >>> np.round(qc.statevector_array(), 5)
    array([0.70711+0.j     , 0.     +0.j     , 0.     +0.j     , 0.     +0.70711j])

    """
    check_tolerance(tolerance)

    if qc is None:
        qc = QuantumCircuit()
        for qb in list(qubits) + list(controls):
            if isinstance(qb, Qubit) and qb not in qc.qubits:
                qc.add_qubit(qb)

    qubits = resolve_qubits(qc, qubits)
    controls = resolve_qubits(qc, controls)

    if not qubits:
        raise InvalidArgument("Tried to prepare a state on an empty register")

    check_distinct(qubits + controls)

    coefficients = pad(coefficients, 2 ** len(qubits))
    magnitudes, phases = polar_arrays(coefficients)

    if not np.any(magnitudes):
        warnings.warn(
            "The provided coefficient vector has zero norm. No gates were emitted."
        )
        return qc

    with control(qc, controls) as sink:
        if adjoint:
            _unprepare(tolerance, magnitudes, phases, qubits[1:], qubits[0], sink)
        else:
            with invert(sink) as buffer:
                _unprepare(tolerance, magnitudes, phases, qubits[1:], qubits[0], buffer)

    return qc


def prepare_arbitrary_state_cp(coefficients, qubits, qc=None, adjoint=False, controls=()):
    """
    Exact version of :func:`approximately_prepare_arbitrary_state_cp`.
    """
    return approximately_prepare_arbitrary_state_cp(
        0.0, coefficients, qubits, qc, adjoint=adjoint, controls=controls
    )


def approximately_prepare_arbitrary_state_d(
    tolerance, coefficients, qubits, qc=None, adjoint=False, controls=()
):
    """
    Prepares the state described by the real ``coefficients`` up to ``tolerance``.
    Negative coefficients carry the phase $\\pi$.

    See :func:`approximately_prepare_arbitrary_state_cp` for the parameters.
    """
    return approximately_prepare_arbitrary_state_cp(
        tolerance, from_real(coefficients), qubits, qc, adjoint=adjoint, controls=controls
    )


def prepare_arbitrary_state_d(coefficients, qubits, qc=None, adjoint=False, controls=()):
    r"""
    Prepares the state described by the real ``coefficients`` exactly.

    Examples
    --------

    >>> import numpy as np
    >>> from qsynth import QuantumCircuit, prepare_arbitrary_state_d
    >>> qc = QuantumCircuit(2)
    >>> qc = prepare_arbitrary_state_d([0.125**0.5, 0, 0.875**0.5], qc.qubits, qc)
    >>> np.round(qc.statevector_array().real, 5)
    array([0.35355, 0.     , 0.93541, 0.     ])

    """
    return approximately_prepare_arbitrary_state_cp(
        0.0, from_real(coefficients), qubits, qc, adjoint=adjoint, controls=controls
    )


def prepare_state(vector, qubits=None, qc=None, tolerance=None):
    r"""
    Convenience wrapper for complex numpy arrays. Performs

    .. math::

        \ket{0} \rightarrow \frac{1}{\|b\|}\sum_{i=0}^{N-1}b_i\ket{i}

    Parameters
    ----------
    vector : array-like
        The (complex) vector $b$.
    qubits : list[Qubit or int], optional
        The register. If given None, a register of $\lceil \log_2 N \rceil$ (at
        least one) qubits is allocated.
    qc : QuantumCircuit, optional
        The circuit to append to. If given None, a new one is created.
    tolerance : float, optional
        The approximation tolerance. By default the ``QSYNTH_DEFAULT_TOLERANCE``
        setting is used.

    Returns
    -------
    QuantumCircuit
        The circuit.

    """
    from qsynth.simulator.numerics_config import default_tolerance

    if tolerance is None:
        tolerance = default_tolerance

    vector = np.asarray(vector, dtype=np.complex128).ravel()

    if len(vector) == 0:
        raise InvalidArgument("Tried to prepare a state from an empty vector")

    if qubits is None:
        n = max(1, int(np.ceil(np.log2(len(vector)))))
        if qc is None:
            qc = QuantumCircuit(n)
            qubits = qc.qubits
        else:
            qubits = [qc.add_qubit() for i in range(n)]

    return approximately_prepare_arbitrary_state_cp(
        tolerance, from_complex(vector), qubits, qc
    )
