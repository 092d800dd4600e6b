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

# Dense statevector simulation of QuantumCircuits.
# The statevector is stored as a tensor with one axis per qubit. Since the index
# is little-endian, qubit i corresponds to tensor axis n-1-i.

import numpy as np

from qsynth.simulator.numerics_config import float_thresh


def apply_gate(tensor, gate, axis_dic):
    """
    Applies a GateOp in-place to the statevector tensor.

    Parameters
    ----------
    tensor : numpy.ndarray
        The statevector reshaped to ``[2]*n``.
    gate : GateOp
        The gate to apply.
    axis_dic : dict
        Maps the Qubits to their tensor axis.

    """
    # Restrict to the subspace where every control is in the |1> state
    index = [slice(None)] * tensor.ndim
    for qb in gate.controls:
        index[axis_dic[qb]] = 1
    index = tuple(index)

    sub_tensor = tensor[index]

    if gate.target is None:
        tensor[index] = sub_tensor * gate.get_unitary()[0, 0]
        return

    target_axis = axis_dic[gate.target]
    # Axes of controls before the target vanish from the sub tensor
    target_axis -= sum(1 for qb in gate.controls if axis_dic[qb] < target_axis)

    res = np.tensordot(gate.get_unitary(), sub_tensor, axes=([1], [target_axis]))
    tensor[index] = np.moveaxis(res, 0, target_axis)


def statevector_sim(qc):
    """
    Simulates the QuantumCircuit starting from the all-zero state.

    Parameters
    ----------
    qc : QuantumCircuit
        The circuit to simulate.

    Returns
    -------
    numpy.ndarray
        The statevector as a complex array of length ``2**len(qc.qubits)``.
        Index bit i corresponds to ``qc.qubits[i]``.

    """
    n = len(qc.qubits)

    statevector = np.zeros(2**n, dtype=np.complex128)
    statevector[0] = 1
    tensor = statevector.reshape([2] * n)

    axis_dic = {qb: n - 1 - i for i, qb in enumerate(qc.qubits)}

    for gate in qc.data:
        apply_gate(tensor, gate, axis_dic)

    return tensor.reshape(-1)


def compare_statevectors(sv_0, sv_1, ignore_gphase=False, precision=None):
    """
    Checks whether two statevectors agree entrywise.

    Parameters
    ----------
    sv_0 : numpy.ndarray
        The first statevector.
    sv_1 : numpy.ndarray
        The second statevector.
    ignore_gphase : bool, optional
        If set to True, the vectors are aligned by the phase of their largest
        entry before comparing. The default is False.
    precision : float, optional
        The absolute tolerance. By default ``float_thresh`` from the numerics
        configuration is used.

    Returns
    -------
    bool

    """
    if precision is None:
        precision = float_thresh

    sv_0 = np.asarray(sv_0, dtype=np.complex128)
    sv_1 = np.asarray(sv_1, dtype=np.complex128)

    if sv_0.shape != sv_1.shape:
        return False

    if ignore_gphase:
        i = np.argmax(np.abs(sv_0))
        if np.abs(sv_1[i]) > precision:
            sv_1 = sv_1 * np.exp(1j * (np.angle(sv_0[i]) - np.angle(sv_1[i])))

    return bool(np.allclose(sv_0, sv_1, atol=precision, rtol=0))
