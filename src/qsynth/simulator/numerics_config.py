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

import os

import numpy as np

try:
    float_thresh = os.environ["QSYNTH_SIMULATOR_FLOAT_THRESH"]
except KeyError:
    float_thresh = 1e-10
float_thresh = np.float64(float_thresh)

try:
    default_tolerance = os.environ["QSYNTH_DEFAULT_TOLERANCE"]
except KeyError:
    default_tolerance = 0.0
default_tolerance = float(default_tolerance)
