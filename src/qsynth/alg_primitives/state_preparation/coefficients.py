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

from typing import NamedTuple

import numpy as np

from qsynth.misc.exceptions import InvalidArgument


class Amplitude(NamedTuple):
    """
    A complex amplitude $r e^{it}$ in polar form.

    Attributes
    ----------
    magnitude : float
        The magnitude $r$.
    phase : float
        The phase $t$ in radians.
    """

    magnitude: float
    phase: float

    def to_complex(self) -> complex:
        return self.magnitude * np.exp(1j * self.phase)


def _as_amplitude(entry) -> Amplitude:
    if isinstance(entry, Amplitude):
        return entry
    try:
        magnitude, phase = entry
    except (TypeError, ValueError):
        raise InvalidArgument(
            f"Could not interpret {entry} as (magnitude, phase) pair"
        ) from None
    return Amplitude(float(magnitude), float(phase))


def pad(coefficients, target_len: int) -> list[Amplitude]:
    """
    Pads a coefficient vector with zero amplitudes at the tail.

    Parameters
    ----------
    coefficients : iterable
        The amplitudes, either as :class:`Amplitude` or as ``(magnitude, phase)``
        pairs.
    target_len : int
        The requested length. Has to be a power of two.

    Raises
    ------
    InvalidArgument
        If ``target_len`` is no power of two or ``coefficients`` has more than
        ``target_len`` entries.

    Returns
    -------
    list[Amplitude]
        The padded coefficient vector.

    Examples
    --------

    >>> from qsynth import pad
    >>> pad([(1.0, 0.0), (0.5, 3.0)], 4)
    [Amplitude(magnitude=1.0, phase=0.0), Amplitude(magnitude=0.5, phase=3.0), Amplitude(magnitude=0.0, phase=0.0), Amplitude(magnitude=0.0, phase=0.0)]

    """
    if target_len < 1 or target_len & (target_len - 1):
        raise InvalidArgument(f"Padding length must be a power of two, got {target_len}")

    coefficients = [_as_amplitude(c) for c in coefficients]

    if len(coefficients) > target_len:
        raise InvalidArgument(
            f"Tried to pad {len(coefficients)} coefficients to length {target_len}"
        )

    return coefficients + [Amplitude(0.0, 0.0)] * (target_len - len(coefficients))


def from_real(values) -> list[Amplitude]:
    """
    Converts real coefficients into amplitudes. The sign is folded into the phase,
    i.e. negative values receive the phase $\\pi$.
    """
    return [
        Amplitude(abs(float(a)), 0.0 if a >= 0 else np.pi)
        for a in np.asarray(values, dtype=np.float64).ravel()
    ]


def from_complex(values) -> list[Amplitude]:
    """
    Converts complex coefficients into amplitudes. Vanishing entries receive the
    phase 0, since ``np.angle(-0.0)`` is $\\pi$.
    """
    values = np.asarray(values, dtype=np.complex128).ravel()
    magnitudes = np.abs(values)
    phases = np.where(magnitudes == 0, 0.0, np.angle(values))
    return [Amplitude(float(r), float(t)) for r, t in zip(magnitudes, phases)]


def normalize(coefficients) -> list[Amplitude]:
    """
    Rescales the magnitudes such that the vector has unit 2-norm. Vectors with
    zero norm are returned unchanged.
    """
    coefficients = [_as_amplitude(c) for c in coefficients]
    norm = np.sqrt(sum(c.magnitude**2 for c in coefficients))
    if norm == 0:
        return coefficients
    return [Amplitude(c.magnitude / norm, c.phase) for c in coefficients]


def to_statevector(coefficients) -> np.ndarray:
    """
    Returns the coefficient vector as complex numpy array.
    """
    return np.array(
        [_as_amplitude(c).to_complex() for c in coefficients], dtype=np.complex128
    )


def polar_arrays(coefficients) -> tuple[np.ndarray, np.ndarray]:
    """
    Splits a coefficient vector into an array of magnitudes and an array of phases.
    """
    coefficients = [_as_amplitude(c) for c in coefficients]
    magnitudes = np.array([c.magnitude for c in coefficients], dtype=np.float64)
    phases = np.array([c.phase for c in coefficients], dtype=np.float64)
    return magnitudes, phases
