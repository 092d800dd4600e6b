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

from qsynth.alg_primitives.state_preparation.coefficients import *
from qsynth.alg_primitives.state_preparation.bloch_angles import *
from qsynth.alg_primitives.state_preparation.multiplexed_rotation import *
from qsynth.alg_primitives.state_preparation.diagonal_unitary import *
from qsynth.alg_primitives.state_preparation.prepare_func import *
