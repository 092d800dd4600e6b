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

from enum import Enum

import numpy as np

from qsynth.circuit.qubit import Qubit


class GateKind(Enum):
    """
    The closed set of elementary instructions the synthesizers emit.

    Rotations follow the convention $R_P(\\theta) = \\exp(-i \\theta P / 2)$ and
    ``gphase`` multiplies the state by $e^{i \\phi}$. ``h``, ``s`` and ``s_dg`` only
    appear as basis changes around a Z-axis multiplexer, ``x`` only as the
    (controlled) bit flip of the sum/difference decomposition.
    """

    RX = "rx"
    RY = "ry"
    RZ = "rz"
    GPHASE = "gphase"
    H = "h"
    S = "s"
    S_DG = "s_dg"
    X = "x"

    @property
    def is_parametrized(self):
        return self in (GateKind.RX, GateKind.RY, GateKind.RZ, GateKind.GPHASE)


_inverse_kinds = {
    GateKind.S: GateKind.S_DG,
    GateKind.S_DG: GateKind.S,
}


class Axis(Enum):
    """
    Rotation axis of a multiplexed rotation.

    ``X`` and ``Y`` are reduced to ``Z`` by conjugating with a basis change, ``I``
    denotes a rotation about the identity, i.e. the global phase
    $e^{-i \\theta / 2}$.
    """

    X = "X"
    Y = "Y"
    Z = "Z"
    I = "I"

    @property
    def rotation_kind(self):
        return {
            Axis.X: GateKind.RX,
            Axis.Y: GateKind.RY,
            Axis.Z: GateKind.RZ,
            Axis.I: GateKind.GPHASE,
        }[self]

    @property
    def basis_change(self):
        """
        The gate kind that maps this axis onto the next axis of the reduction
        chain Y -> X -> Z together with that axis. ``None`` for Z and I.
        """
        if self is Axis.X:
            return GateKind.H, Axis.Z
        if self is Axis.Y:
            return GateKind.S_DG, Axis.X
        return None


class GateOp:
    """
    An emitted elementary instruction. GateOps combine a :class:`GateKind` with the
    operands it acts on: an (optional) target Qubit, an ordered tuple of control
    Qubits and a real angle.

    The ``gphase`` kind is the only kind without a target. Uncontrolled, it
    multiplies the whole state by $e^{i \\phi}$; controlled, only the subspace in
    which every control is in the $\\ket{1}$ state picks up the phase.

    GateOps are treated as immutable records. Transformations like
    :meth:`inverse` or :meth:`control` return new objects.

    Parameters
    ----------
    kind : GateKind or str
        The kind of the instruction.
    target : Qubit, optional
        The Qubit the instruction acts on. Required for every kind but ``gphase``.
    controls : iterable[Qubit], optional
        The Qubits controlling the instruction. The default is ().
    angle : float, optional
        The rotation/phase angle. Ignored for non-parametrized kinds.

    Examples
    --------

    >>> from qsynth import GateOp, Qubit
    >>> qb_0, qb_1 = Qubit("a"), Qubit("b")
    >>> gate = GateOp("rz", qb_1, [qb_0], 0.25)
    >>> gate
    rz(0.25)(Qubit(a), Qubit(b))
    >>> gate.inverse()
    rz(-0.25)(Qubit(a), Qubit(b))

    """

    __slots__ = ["kind", "target", "controls", "angle"]

    def __init__(self, kind, target=None, controls=(), angle=0.0):
        kind = GateKind(kind)

        if target is None and kind is not GateKind.GPHASE:
            raise Exception(f"Tried to create {kind.value} gate without target qubit")

        if target is not None and not isinstance(target, Qubit):
            raise Exception(f"Tried to create gate with target of type {type(target)}")

        controls = tuple(controls)
        for qb in controls:
            if not isinstance(qb, Qubit):
                raise Exception(f"Tried to create gate with control of type {type(qb)}")

        if target is not None and target in controls:
            raise Exception(f"Qubit {target} can not be control and target of a gate")

        if len(set(controls)) != len(controls):
            raise Exception("Tried to create gate with duplicate control qubits")

        if not kind.is_parametrized:
            angle = 0.0

        self.kind = kind
        self.target = target
        self.controls = controls
        self.angle = float(angle)

    @property
    def name(self):
        return self.kind.value

    @property
    def qubits(self):
        """
        The list of Qubits the instruction touches (controls first).
        """
        if self.target is None:
            return list(self.controls)
        return list(self.controls) + [self.target]

    def inverse(self):
        """
        Returns the inverse of this GateOp.

        Parametrized kinds are inverted by negating the angle, ``s`` and ``s_dg``
        are swapped and the remaining kinds are self-inverse.

        Returns
        -------
        GateOp
            The daggered GateOp.

        """
        if self.kind.is_parametrized:
            return GateOp(self.kind, self.target, self.controls, -self.angle)
        return GateOp(
            _inverse_kinds.get(self.kind, self.kind), self.target, self.controls
        )

    def control(self, qubits):
        """
        Returns a copy of this GateOp with ``qubits`` prepended to the controls.

        Parameters
        ----------
        qubits : Qubit or list[Qubit]
            The additional control Qubits.

        Returns
        -------
        GateOp
            The controlled GateOp.

        """
        if isinstance(qubits, Qubit):
            qubits = [qubits]
        return GateOp(
            self.kind, self.target, list(qubits) + list(self.controls), self.angle
        )

    def get_unitary(self):
        """
        Returns the matrix of the uncontrolled kind: a 2x2 array for gates with a
        target, a 1x1 array for ``gphase``.

        Returns
        -------
        numpy.ndarray
            The unitary matrix.

        """
        from qsynth.circuit.standard_operations import op_unitary

        return op_unitary(self.kind, self.angle)

    def __eq__(self, other):
        if not isinstance(other, GateOp):
            return NotImplemented
        return (
            self.kind is other.kind
            and self.target == other.target
            and self.controls == other.controls
            and self.angle == other.angle
        )

    __hash__ = None

    def __str__(self):
        if self.kind.is_parametrized:
            res = self.name + "(" + str(np.round(self.angle, 8)) + ")"
        else:
            res = self.name
        return res + "(" + str(self.qubits)[1:-1] + ")"

    def __repr__(self):
        return self.__str__()
