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

# This file uses the GateOp constructor from operation.py to define
# the gates emitted by the synthesis routines together with their matrices

import numpy as np

from qsynth.circuit.operation import GateKind, GateOp


def RXGate(phi, target, controls=()):
    return GateOp(GateKind.RX, target, controls, phi)


def RYGate(phi, target, controls=()):
    return GateOp(GateKind.RY, target, controls, phi)


def RZGate(phi, target, controls=()):
    return GateOp(GateKind.RZ, target, controls, phi)


def GPhaseGate(phi, controls=()):
    return GateOp(GateKind.GPHASE, None, controls, phi)


def HGate(target, controls=()):
    return GateOp(GateKind.H, target, controls)


def SGate(target, controls=()):
    return GateOp(GateKind.S, target, controls)


def SDGGate(target, controls=()):
    return GateOp(GateKind.S_DG, target, controls)


def XGate(target, controls=()):
    return GateOp(GateKind.X, target, controls)


def CXGate(control, target):
    return XGate(target, [control])


def op_unitary(kind, angle=0.0):
    """
    Returns the matrix of an uncontrolled gate of the given kind as a complex
    numpy array.
    """
    kind = GateKind(kind)
    c = np.cos(angle / 2)
    s = np.sin(angle / 2)

    if kind is GateKind.RX:
        res = [[c, -1j * s], [-1j * s, c]]
    elif kind is GateKind.RY:
        res = [[c, -s], [s, c]]
    elif kind is GateKind.RZ:
        res = [[np.exp(-0.5j * angle), 0], [0, np.exp(0.5j * angle)]]
    elif kind is GateKind.GPHASE:
        res = [[np.exp(1j * angle)]]
    elif kind is GateKind.H:
        res = np.array([[1, 1], [1, -1]]) / np.sqrt(2)
    elif kind is GateKind.S:
        res = [[1, 0], [0, 1j]]
    elif kind is GateKind.S_DG:
        res = [[1, 0], [0, -1j]]
    elif kind is GateKind.X:
        res = [[0, 1], [1, 0]]

    return np.array(res, dtype=np.complex128)
