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

from qsynth.circuit import GateList


class QuantumEnvironment:
    """
    Base class of the environments. Environments collect the gates of their body in
    a buffer (a :class:`GateList`, which is returned by ``__enter__``) and hand a
    transformed version to the outer sink when the body finishes.

    If the body raises, nothing is handed over and the exception propagates. Hence
    an environment either emits its complete content or nothing at all.

    Inheritors implement ``transform``.

    Parameters
    ----------
    sink : GateSink
        The outer sink.

    """

    def __init__(self, sink):
        self.sink = sink

    def __enter__(self):
        self.buffer = GateList()
        return self.buffer

    def __exit__(self, exception_type, exception_value, traceback):
        if exception_type is not None:
            return

        for gate in self.transform(list(self.buffer)):
            self.sink.append(gate)

    def transform(self, gates):
        raise NotImplementedError
