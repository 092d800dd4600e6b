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

import numpy as np

from qsynth.misc.exceptions import InvalidArgument

# A small epsilon value for numerical stability.
# Defined here for convenience, so it can be imported elsewhere.
_EPSILON = np.sqrt(np.finfo(np.float64).eps)


def check_tolerance(tolerance):
    """
    Raises InvalidArgument if ``tolerance`` is negative (or NaN).
    """
    if not tolerance >= 0:
        raise InvalidArgument(f"Tolerance must be non-negative, got {tolerance}")


def any_outside_tolerance(tolerance, values):
    """
    Returns True if any entry of ``values`` has an absolute value of at least
    ``tolerance``. At tolerance 0 this is always True for non-empty input.
    """
    return bool(np.any(np.abs(np.asarray(values, dtype=np.float64)) >= tolerance))
