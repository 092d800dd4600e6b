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

from qsynth.alg_primitives.state_preparation.coefficients import Amplitude


def bloch_angles(a_0: Amplitude, a_1: Amplitude) -> tuple[Amplitude, float, float]:
    r"""
    Merges the amplitudes of the two basis states which only differ in the value of
    the target qubit into one amplitude and the two angles that disentangle the
    target qubit.

    The results satisfy

    .. math::

        a_0\ket{0} + a_1\ket{1} = r e^{it}\left(e^{-i\phi/2}\cos(\theta/2)\ket{0}
        + e^{i\phi/2}\sin(\theta/2)\ket{1}\right)

    i.e. $R_Z(\phi) R_Y(\theta)$ prepares the target qubit state up to the merged
    amplitude $r e^{it}$.

    The function only uses numpy ufuncs, so the fields of the amplitudes can also be
    arrays. If both magnitudes vanish, both angles are zero.

    Parameters
    ----------
    a_0 : Amplitude
        The amplitude of the basis state where the target qubit is $\ket{0}$.
    a_1 : Amplitude
        The amplitude of the basis state where the target qubit is $\ket{1}$.

    Returns
    -------
    merged : Amplitude
        The merged amplitude $(r, t)$.
    phi : float
        The Z rotation angle $\phi$.
    theta : float
        The Y rotation angle $\theta$.

    """
    r_0, t_0 = a_0
    r_1, t_1 = a_1

    r = np.sqrt(r_0**2 + r_1**2)
    t = (t_0 + t_1) / 2
    phi = t_1 - t_0
    # arctan2(0, 0) is 0
    theta = 2 * np.arctan2(r_1, r_0)

    return Amplitude(r, t), phi, theta


def disentangling_angles(magnitudes, phases):
    """
    Applies :func:`bloch_angles` to every pair of consecutive entries of a coefficient
    vector.

    Parameters
    ----------
    magnitudes : numpy.ndarray
        The magnitudes of the coefficient vector (length $2^{k+1}$).
    phases : numpy.ndarray
        The phases of the coefficient vector.

    Returns
    -------
    merged_magnitudes : numpy.ndarray
        Magnitudes of the merged vector (length $2^k$).
    merged_phases : numpy.ndarray
        Phases of the merged vector.
    phis : numpy.ndarray
        The Z angles, one per pair.
    thetas : numpy.ndarray
        The Y angles, one per pair.

    """
    merged, phis, thetas = bloch_angles(
        Amplitude(magnitudes[0::2], phases[0::2]),
        Amplitude(magnitudes[1::2], phases[1::2]),
    )
    return merged.magnitude, merged.phase, phis, thetas
