from dataclasses import dataclass

import numpy as np

from sbeam.core.exceptions import InvalidGeometry
from sbeam.core.preprocessing.material import Material, _is_number


@dataclass(frozen=True, eq=False)
class Beam:
    r"""Create the geometry of a beam.

    Parameters
    ----------
    primary_span : :any:`float`
        Length of the first span, measured from the left end support.
    secondary_span : :any:`float`
        Length of the second span, ``0`` for single span beams. Only
        multi-span conditions read it.
    material : :any:`Material`
        Material of the beam. It is shared by reference.

    Raises
    ------
    InvalidGeometry
        :py:attr:`primary_span` has to be a finite number greater than
        zero.
    InvalidGeometry
        :py:attr:`secondary_span` has to be a finite number greater than or
        equal to zero.
    TypeError
        :py:attr:`material` has to be a :any:`Material`.
    """

    primary_span: float
    secondary_span: float
    material: Material

    def __post_init__(self):
        if not _is_number(self.primary_span) or not np.isfinite(
                self.primary_span):
            raise InvalidGeometry('primary_span has to be a finite number.')
        if self.primary_span <= 0:
            raise InvalidGeometry('primary_span has to be greater than zero.')
        if not _is_number(self.secondary_span) or not np.isfinite(
                self.secondary_span):
            raise InvalidGeometry('secondary_span has to be a finite number.')
        if self.secondary_span < 0:
            raise InvalidGeometry(
                'secondary_span has to be greater than or equal to zero.'
            )
        if not isinstance(self.material, Material):
            raise TypeError('material has to be an instance of Material.')

    @property
    def total_span(self) -> float:
        """Sum of the primary and the secondary span."""
        return self.primary_span + self.secondary_span
