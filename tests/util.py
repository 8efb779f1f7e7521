# This source code is part of the Linkcell package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

from dataclasses import dataclass


@dataclass
class Particle:
    """
    A user-defined point record, that exposes its coordinates as
    attributes.
    """

    x: float
    y: float
    z: float
