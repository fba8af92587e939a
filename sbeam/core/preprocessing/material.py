from dataclasses import dataclass
from numbers import Real
from types import MappingProxyType
from typing import Mapping

import numpy as np

from sbeam.core.exceptions import InvalidMaterial


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


@dataclass(frozen=True, eq=False)
class Material:
    r"""Create a named material for a beam.

    Parameters
    ----------
    name : :any:`str`
        Name of the material, e.g. ``'S235'``.
    properties : :any:`dict`
        Physical properties referenced by the analyzers. The keys read are
        the Young's modulus ``'E'`` and the second moment of area ``'I'``
        or the combined flexural rigidity ``'EI'``. Further keys are kept
        but not used.

    Raises
    ------
    InvalidMaterial
        :py:attr:`name` has to be a non-empty string.
    InvalidMaterial
        All values of :py:attr:`properties` have to be finite numbers.

    Examples
    --------
    >>> from sbeam import Material
    >>> steel = Material('steel', {'E': 200000, 'I': 0.0001})
    >>> steel.flexural_rigidity
    20.0
    """

    name: str
    properties: Mapping[str, float]

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise InvalidMaterial('name has to be a non-empty string.')
        if not isinstance(self.properties, Mapping):
            raise InvalidMaterial('properties has to be a mapping.')
        for key, value in self.properties.items():
            if not _is_number(value) or not np.isfinite(value):
                raise InvalidMaterial(
                    f'property {key!r} has to be a finite number, '
                    f'got {value!r}.'
                )
        # read-only copy, the caller's dict may change afterwards
        object.__setattr__(
            self, 'properties', MappingProxyType(dict(self.properties))
        )

    @property
    def flexural_rigidity(self) -> float:
        r"""Flexural rigidity :math:`EI` of the material.

        ``'EI'`` is used when given, otherwise the product of ``'E'`` and
        ``'I'``.

        Raises
        ------
        InvalidMaterial
            Neither ``'EI'`` nor both ``'E'`` and ``'I'`` are given, or the
            resulting rigidity is not greater than zero.
        """
        props = self.properties
        if 'EI' in props:
            ei = float(props['EI'])
        elif 'E' in props and 'I' in props:
            ei = float(props['E']) * float(props['I'])
        else:
            raise InvalidMaterial(
                f'material {self.name!r} needs either "EI" or both "E" and '
                f'"I" to compute deflections.'
            )
        if ei <= 0:
            raise InvalidMaterial(
                'flexural rigidity has to be greater than zero.'
            )
        return ei
