from dataclasses import asdict, dataclass

from sbeam.core.calc_methods.analyzer import Analyzer
from sbeam.core.exceptions import InvalidGeometry
from sbeam.core.logger_mixin import table_values
from sbeam.core.preprocessing.beam import Beam


@dataclass(frozen=True)
class Reactions:
    r"""Support moment, reactions and span shear forces of a two span beam.

    Parameters
    ----------
    m1 : :any:`float`
        Magnitude of the hogging moment over the middle support. The bending
        moment there equals ``-m1``.
    r1, r2, r3 : :any:`float`
        Reactions of the left, middle and right support.
    v1, v2 : :any:`float`
        Shear force at the left end and just left of the middle support.
    v3, v4 : :any:`float`
        Shear force just right of the middle support and at the right end.
    """

    m1: float
    r1: float
    r2: float
    r3: float
    v1: float
    v2: float
    v3: float
    v4: float


@dataclass(eq=False)
class TwoSpanUnequal(Analyzer):
    r"""Continuous beam over three supports with two spans of differing
    length, uniformly loaded over its whole length.

    The spans are :math:`L_1` = :py:attr:`Beam.primary_span` and
    :math:`L_2` = :py:attr:`Beam.secondary_span`. The moment over the middle
    support follows from the three-moment equation with zero end moments:

    .. math::
        M_1 = \frac{W (L_1^3 + L_2^3)}{8 (L_1 + L_2)}

    The domain is split into ``[0, L1]`` for the first span and
    ``(L1, L1 + L2]`` for the second, evaluated in the local coordinate
    :math:`u = x - L_1`. The shear force at ``x = L1`` is the value right of
    the middle support, i.e. with the reaction :math:`R_2` included, so the
    curve jumps by :math:`R_2` when crossing the support.

    Raises
    ------
    InvalidGeometry
        :py:attr:`Beam.secondary_span` has to be greater than zero.

    Examples
    --------
    >>> from sbeam import Beam, Material, TwoSpanUnequal
    >>> beam = Beam(3, 5, Material('timber', {'EI': 1500}))
    >>> TwoSpanUnequal().reactions(beam, 5).m1
    11.875
    """

    def total_span(self, beam: Beam) -> float:
        return beam.primary_span + beam.secondary_span

    def reactions(self, beam: Beam, load: float) -> Reactions:
        """Solves the support moment, reactions and span shear forces."""
        l1, l2 = beam.primary_span, beam.secondary_span
        if l2 <= 0:
            raise InvalidGeometry(
                'secondary_span has to be greater than zero for a two span '
                'beam.'
            )
        w = load
        m1 = w * (l1 ** 3 + l2 ** 3) / (8 * (l1 + l2))
        r1 = w * l1 / 2 - m1 / l1
        r3 = w * l2 / 2 - m1 / l2
        r2 = w * (l1 + l2) - r1 - r3
        v2 = r1 - w * l1
        result = Reactions(
            m1=m1, r1=r1, r2=r2, r3=r3, v1=r1, v2=v2, v3=v2 + r2, v4=-r3
        )
        self.logger.debug(f"Reactions: \n{table_values(asdict(result))}")
        return result

    def get_deflection_equation(self, beam: Beam, load: float):
        ei = beam.material.flexural_rigidity
        l1, l2 = beam.primary_span, beam.secondary_span
        w, scale = load, self.deflection_scale
        r = self.reactions(beam, load)

        # span 1: EI w = R1 x^3 / 6 - W x^4 / 24 + c1 x, with w(0) = w(L1) = 0
        c1 = w * l1 ** 3 / 24 - r.r1 * l1 ** 2 / 6
        # span 2: slope at the middle support taken over from span 1
        d1 = r.r1 * l1 ** 2 / 2 - w * l1 ** 3 / 6 + c1

        def deflection(x):
            if x <= l1:
                ei_w = r.r1 * x ** 3 / 6 - w * x ** 4 / 24 + c1 * x
            else:
                u = x - l1
                ei_w = (-r.m1 * u ** 2 / 2 + r.v3 * u ** 3 / 6 -
                        w * u ** 4 / 24 + d1 * u)
            return scale * ei_w / ei
        return self._bounded(deflection, l1 + l2)

    def get_bending_moment_equation(self, beam: Beam, load: float):
        l1, l2 = beam.primary_span, beam.secondary_span
        w = load
        r = self.reactions(beam, load)

        def bending_moment(x):
            if x <= l1:
                return r.r1 * x - w * x ** 2 / 2
            u = x - l1
            return -r.m1 + r.v3 * u - w * u ** 2 / 2
        return self._bounded(bending_moment, l1 + l2)

    def get_shear_force_equation(self, beam: Beam, load: float):
        l1, l2 = beam.primary_span, beam.secondary_span
        w = load
        r = self.reactions(beam, load)

        def shear_force(x):
            if x < l1:
                return r.r1 - w * x
            return r.r1 - w * x + r.r2
        return self._bounded(shear_force, l1 + l2)
