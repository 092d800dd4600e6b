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

import itertools

qubit_hash = itertools.count()


class Qubit:
    """
    This class describes qubits. Qubits are opaque handles which are created by
    supplying an identifier string. The synthesis routines never create or destroy
    Qubits, they only designate them as controls or targets.

    Attributes
    ----------
    identifier : str
        A string to identify the Qubit.

    Examples
    --------

    We create a Qubit and add it to a :ref:`QuantumCircuit`:

    >>> from qsynth import QuantumCircuit, Qubit
    >>> qb = Qubit("alphonse")
    >>> qc = QuantumCircuit()
    >>> qc.add_qubit(qb)
    Qubit(alphonse)
    >>> qc.ry(0.5, qb)
    >>> qc.data
    [ry(0.5)(Qubit(alphonse))]

    """

    __slots__ = ["hash_value", "identifier"]

    def __init__(self, identifier):
        if not isinstance(identifier, str):
            raise Exception(
                f"Tried to create Qubit with identifier of type {type(identifier)} "
                "(required is str)"
            )
        self.identifier = identifier
        self.hash_value = next(qubit_hash)

    def __str__(self):
        return self.identifier

    def __repr__(self):
        return "Qubit(" + self.identifier + ")"

    def __hash__(self):
        return self.hash_value

    def __eq__(self, other):
        if not isinstance(other, Qubit):
            return NotImplemented
        return self.hash_value == other.hash_value

    def __add__(self, other):
        if not isinstance(other, list):
            raise Exception(
                f"Tried to add Qubit to type {type(other)} (only list is possible)"
            )
        return [self] + other

    def __radd__(self, other):
        if not isinstance(other, list):
            raise Exception(
                f"Tried to add Qubit to type {type(other)} (only list is possible)"
            )
        return other + [self]
