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

from qsynth.circuit import GateKind


# Function to convert qsynth quantum circuits to Qiskit quantum circuits
def convert_to_qiskit(qc):
    """
    Converts a qsynth QuantumCircuit into a Qiskit QuantumCircuit.

    Every Qubit becomes a single-qubit register named after its identifier. Since
    Qiskit uses the same (little-endian) qubit ordering, the statevectors of both
    circuits agree. Uncontrolled global phases are accumulated in the
    ``global_phase`` attribute, controlled ones become (multi-)controlled phase gates
    acting on the controls.

    Parameters
    ----------
    qc : QuantumCircuit
        The circuit to convert.

    Returns
    -------
    qiskit.QuantumCircuit
        The converted circuit.

    """
    from qiskit import QuantumCircuit, QuantumRegister
    import qiskit.circuit.library.standard_gates as qsk_gates

    qiskit_qc = QuantumCircuit()

    # This dic gives the qiskit qubits when presented with qsynth qubits
    bit_dic = {}

    for qb in qc.qubits:
        qiskit_qc.add_register(QuantumRegister(1, name=qb.identifier))
        bit_dic[qb] = qiskit_qc.qubits[-1]

    for gate in qc.data:
        qubit_list = [bit_dic[qb] for qb in gate.controls]

        if gate.kind is GateKind.GPHASE:
            if not qubit_list:
                qiskit_qc.global_phase += gate.angle
                continue

            # A controlled global phase is a phase gate on the controls
            qiskit_ins = qsk_gates.PhaseGate(gate.angle)
            if len(qubit_list) > 1:
                qiskit_ins = qiskit_ins.control(len(qubit_list) - 1)

        else:
            qiskit_ins = create_qiskit_instruction(gate)
            if qubit_list:
                qiskit_ins = qiskit_ins.control(len(qubit_list))
            qubit_list.append(bit_dic[gate.target])

        qiskit_qc.append(qiskit_ins, qubit_list)

    return qiskit_qc


def create_qiskit_instruction(gate):
    import qiskit.circuit.library.standard_gates as qsk_gates

    if gate.kind is GateKind.RX:
        qiskit_ins = qsk_gates.RXGate(gate.angle)
    elif gate.kind is GateKind.RY:
        qiskit_ins = qsk_gates.RYGate(gate.angle)
    elif gate.kind is GateKind.RZ:
        qiskit_ins = qsk_gates.RZGate(gate.angle)
    elif gate.kind is GateKind.H:
        qiskit_ins = qsk_gates.HGate()
    elif gate.kind is GateKind.S:
        qiskit_ins = qsk_gates.SGate()
    elif gate.kind is GateKind.S_DG:
        qiskit_ins = qsk_gates.SdgGate()
    elif gate.kind is GateKind.X:
        qiskit_ins = qsk_gates.XGate()
    else:
        raise Exception("Don't know how to convert operation " + gate.name + " to qiskit")

    return qiskit_ins
