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

from abc import ABC, abstractmethod

import numpy as np

import qsynth.circuit.standard_operations as ops
from qsynth.circuit.operation import GateOp
from qsynth.circuit.qubit import Qubit


class GateSink(ABC):
    """
    Abstract append-only receiver of :class:`GateOp` records.

    The synthesis routines only ever call :meth:`append`, in generation order.
    Since quantum gates generally do not commute, implementations must preserve
    that order exactly.
    """

    @abstractmethod
    def append(self, gate):
        """
        Receives the next GateOp.
        """


# Class to describe quantum circuits
# The naming of the attributes is rather similar to the qiskit equivalent
# The key attributes are

# The list of qubits (.qubits).
# the list of instructions (.data)


class QuantumCircuit(GateSink):
    """
    This class describes quantum circuits. It is the default :class:`GateSink` of the
    synthesis routines. Many of the attribute and method names are oriented at the
    `Qiskit QuantumCircuit
    <https://docs.quantum.ibm.com/api/qiskit/qiskit.circuit.QuantumCircuit>`_ class.

    QuantumCircuits can be visualized by calling ``print`` on them.

    Parameters
    ----------

    num_qubits : integer, optional
        The amount of qubits, this QuantumCircuit is initialized with. The default is 0.
    name : string, optional
        A name for the QuantumCircuit. The default will generated a generic name.


    Examples
    --------

    We create a QuantumCircuit and prepare a Bell state:

    >>> import numpy as np
    >>> from qsynth import QuantumCircuit
    >>> qc = QuantumCircuit(2)
    >>> qc.ry(np.pi/2, qc.qubits[0])
    >>> qc.cx(qc.qubits[0], qc.qubits[1])
    >>> qc.statevector_array()
    array([0.70710678+0.j, 0.        +0.j, 0.        +0.j, 0.70710678+0.j])

    """

    qubit_index_counter = np.zeros(1, dtype=int)

    def __init__(self, num_qubits=0, name=None):
        self.data = []
        self.qubits = []

        if name is None:
            self.name = "circuit_" + str(id(self))[-5:]
        else:
            self.name = name

        if isinstance(num_qubits, int):
            for i in range(num_qubits):
                self.add_qubit()
        else:
            raise Exception(
                f"Tried to initialize QuantumCircuit with type {type(num_qubits)}"
            )

    # Method to add qubit objects to the circuit
    def add_qubit(self, qubit=None):
        """
        Adds a Qubit to the QuantumCircuit.

        Parameters
        ----------
        qubit : Qubit, optional
            The Qubit to be added. If given none, a new Qubit will be generated.

        Returns
        -------
        Qubit
            The added Qubit.

        """

        if qubit is None:
            self.qubit_index_counter[0] += 1
            qubit = Qubit("qb_" + str(self.qubit_index_counter[0]))

        if not isinstance(qubit, Qubit):
            raise Exception(f"Tried to add type {type(qubit)} as a qubit")

        for qb in self.qubits:
            if qb.identifier == qubit.identifier:
                raise Exception(f"Qubit name {qubit.identifier} already exists")

        self.qubits.append(qubit)

        return self.qubits[-1]

    def append(self, gate):
        """
        Appends a :class:`GateOp` to the QuantumCircuit.

        Parameters
        ----------
        gate : GateOp
            The gate to append. Every Qubit it touches must belong to this circuit.

        """
        if not isinstance(gate, GateOp):
            raise Exception(
                "Tried to append object type " + str(type(gate)) + " which is no GateOp"
            )

        for qb in gate.qubits:
            if qb not in self.qubits:
                raise Exception(
                    f"Instruction {gate} contains qubit {qb} which is not part of "
                    f"circuit {self.name}"
                )

        self.data.append(gate)

    # Method to extend the given circuit with another circuit
    # The dic translation dic encodes how the qubits should be plugged into each other
    def extend(self, other, translation_dic="id"):
        """
        Extends self in-place by another QuantumCircuit.

        Parameters
        ----------
        other : QuantumCircuit
            The QuantumCircuit to extend by.
        translation_dic : dict, optional
            The dictionary containing the information about which Qubits should be
            plugged into each other. This dictionary should contain qubits of other as
            keys and qubits of self as values. If given none, it is assumed that both
            QuantumCircuits have matching Qubits.

        """

        if translation_dic == "id":
            for gate in other.data:
                self.append(gate)
            return

        for gate in other.data:
            if gate.target is None:
                target = None
            else:
                target = translation_dic[gate.target]
            controls = [translation_dic[qb] for qb in gate.controls]
            self.append(GateOp(gate.kind, target, controls, gate.angle))

    # Returns a copy of self
    def copy(self):
        """
        Returns a copy of the given QuantumCircuit.

        Returns
        -------
        QuantumCircuit
            The copied QuantumCircuit.

        """
        res = self.clearcopy()
        res.data = list(self.data)
        return res

    # Returns a copy of self but with no instructions
    def clearcopy(self):
        """
        Returns a copy of the given QuantumCircuit but without any data
        (i.e. just the Qubits).

        Returns
        -------
        QuantumCircuit
            The empty, copied QuantumCircuit.

        """
        res = QuantumCircuit(name=self.name)
        res.qubits = list(self.qubits)
        return res

    # Generates the inverse of self by applying the inverse gates in reversed order
    def inverse(self):
        """
        Returns the inverse/daggered QuantumCircuit.

        Returns
        -------
        inverted_circuit : QuantumCircuit
            The inverted QuantumCircuit.

        Examples
        --------

        Daggering a QuantumCircuit reverses the order and daggers each gate.

        >>> from qsynth import QuantumCircuit
        >>> qc = QuantumCircuit(1)
        >>> qc.ry(0.5, 0)
        >>> qc.s(0)
        >>> qc.inverse().data
        [s_dg(Qubit(qb_1)), ry(-0.5)(Qubit(qb_1))]

        """
        inverted_circuit = self.clearcopy()
        inverted_circuit.data = inverse_gates(self.data)
        return inverted_circuit

    def control(self, qubits):
        """
        Returns a QuantumCircuit where every gate is additionally controlled on
        ``qubits``. Control Qubits which are not yet part of self are added.

        Parameters
        ----------
        qubits : Qubit or list[Qubit]
            The control Qubits.

        Returns
        -------
        QuantumCircuit
            The controlled QuantumCircuit.

        """
        if isinstance(qubits, Qubit):
            qubits = [qubits]

        res = self.clearcopy()
        for qb in qubits:
            if qb not in res.qubits:
                res.add_qubit(qb)

        res.data = controlled_gates(self.data, qubits)
        return res

    def count_ops(self):
        """
        Counts the amount of gates of each type. Controlled gates are counted with one
        ``c`` prefix per control.

        Returns
        -------
        dict
            A dictionary of the form ``{gate_name : count}``.

        Examples
        --------

        >>> from qsynth import QuantumCircuit
        >>> qc = QuantumCircuit(2)
        >>> qc.cx(0, 1)
        >>> qc.rz(0.2, 1)
        >>> qc.cx(0, 1)
        >>> qc.count_ops()
        {'cx': 2, 'rz': 1}

        """
        count_dic = {}
        for gate in self.data:
            name = "c" * len(gate.controls) + gate.name
            count_dic[name] = count_dic.get(name, 0) + 1
        return count_dic

    def cnot_count(self):
        return self.count_ops().get("cx", 0)

    def statevector_array(self):
        """
        Performs a simulation of the statevector of self and returns a numpy array of
        complex numbers.

        The ordering is little-endian: the i-th Qubit of ``self.qubits`` corresponds
        to the i-th bit of the index.

        Returns
        -------
        numpy.ndarray
            The statevector of this circuit.

        """
        from qsynth.simulator import statevector_sim

        return statevector_sim(self)

    def to_qiskit(self):
        """
        Method to convert the given QuantumCircuit to a Qiskit QuantumCircuit.

        Returns
        -------
        Qiskit QuantumCircuit
            The converted circuit.

        """
        from qsynth.interface.circuit_converter import convert_to_qiskit

        return convert_to_qiskit(self)

    # Printing method
    def __str__(self):
        from qiskit.visualization import circuit_drawer

        return str(circuit_drawer(self.to_qiskit(), output="text"))

    def convert_to_qubit(self, input):
        if isinstance(input, Qubit):
            return input
        elif isinstance(input, (int, np.integer)):
            return self.qubits[input]
        raise Exception("Couldn't convert type " + str(type(input)) + " to qubit")

    # Several methods to apply the standard operations defined in
    # standard_operations.py
    def rx(self, phi, qubit):
        """
        Instruct a parametrized RX-gate.

        Parameters
        ----------
        phi : float
            The angle parameter.

        qubit : Qubit or int
            The Qubit to apply the gate on.
        """
        if phi == 0:
            return
        self.append(ops.RXGate(phi, self.convert_to_qubit(qubit)))

    def ry(self, phi, qubit):
        """
        Instruct a parametrized RY-gate.

        Parameters
        ----------
        phi : float
            The angle parameter.

        qubit : Qubit or int
            The Qubit to apply the gate on.
        """
        if phi == 0:
            return
        self.append(ops.RYGate(phi, self.convert_to_qubit(qubit)))

    def rz(self, phi, qubit):
        """
        Instruct a parametrized RZ-gate.

        Parameters
        ----------
        phi : float
            The angle parameter.

        qubit : Qubit or int
            The Qubit to apply the gate on.
        """
        if phi == 0:
            return
        self.append(ops.RZGate(phi, self.convert_to_qubit(qubit)))

    def h(self, qubit):
        self.append(ops.HGate(self.convert_to_qubit(qubit)))

    def s(self, qubit):
        self.append(ops.SGate(self.convert_to_qubit(qubit)))

    def s_dg(self, qubit):
        self.append(ops.SDGGate(self.convert_to_qubit(qubit)))

    def x(self, qubit):
        self.append(ops.XGate(self.convert_to_qubit(qubit)))

    def cx(self, control, target):
        """
        Instruct a CX-gate.

        Parameters
        ----------
        control : Qubit or int
            The Qubit to control on.
        target : Qubit or int
            The target Qubit.

        """
        self.append(
            ops.CXGate(self.convert_to_qubit(control), self.convert_to_qubit(target))
        )

    def gphase(self, phi):
        """
        Instruct a global phase. Global phases do not directly influence the
        QuantumCircuits outcome however they can become physical if used as a base gate
        for a controlled operation.

        Parameters
        ----------
        phi : float
            The angle parameter.
        """
        self.append(ops.GPhaseGate(phi))


def inverse_gates(gates):
    """
    Returns the inverse of a gate sequence: the order is reversed and every
    gate is daggered (i.e. angles are negated).

    Parameters
    ----------
    gates : iterable[GateOp]
        The gate sequence.

    Returns
    -------
    list[GateOp]
        The inverted sequence.

    """
    return [gate.inverse() for gate in reversed(list(gates))]


def controlled_gates(gates, controls):
    """
    Returns the gate sequence where every gate is additionally controlled on
    ``controls``.

    Parameters
    ----------
    gates : iterable[GateOp]
        The gate sequence.
    controls : list[Qubit]
        The control Qubits.

    Returns
    -------
    list[GateOp]
        The controlled sequence.

    """
    controls = list(controls)
    if not controls:
        return list(gates)
    return [gate.control(controls) for gate in gates]


class GateList(list, GateSink):
    """
    A GateSink which simply records the received gates in a list. In contrast to
    :class:`QuantumCircuit` it accepts gates on arbitrary Qubits.
    """

    def append(self, gate):
        if not isinstance(gate, GateOp):
            raise Exception(
                "Tried to append object type " + str(type(gate)) + " which is no GateOp"
            )
        list.append(self, gate)
