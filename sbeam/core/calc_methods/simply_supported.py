from dataclasses import dataclass

from sbeam.core.calc_methods.analyzer import Analyzer
from sbeam.core.preprocessing.beam import Beam


@dataclass(eq=False)
class SimplySupported(Analyzer):
    r"""Single span beam on two end supports under a uniform load.

    Only :py:attr:`Beam.primary_span` (:math:`L`) is used. With the load
    :math:`W` and the flexural rigidity :math:`EI` the equations are:

    .. math::
        M(x) = \frac{W}{2} (L x - x^2)

        V(x) = W \left(\frac{L}{2} - x\right)

        w(x) = -\frac{W x (L^3 - 2 L x^2 + x^3)}{24 EI}

    The deflection follows from integrating :math:`EI w'' = M` twice with
    :math:`w(0) = w(L) = 0`.

    Examples
    --------
    >>> from sbeam import Beam, Material, SimplySupported
    >>> beam = Beam(4, 0, Material('steel', {'E': 200000, 'I': 0.0001}))
    >>> SimplySupported().get_shear_force_equation(beam, 10)(0)
    PointSample(x=0, y=20.0)
    """

    def total_span(self, beam: Beam) -> float:
        return beam.primary_span

    def get_deflection_equation(self, beam: Beam, load: float):
        ei = beam.material.flexural_rigidity
        w, length = load, beam.primary_span
        scale = self.deflection_scale
        self.logger.debug(f"Deflection equation: L={length}, W={w}, EI={ei}")

        def deflection(x):
            return scale * (-w * x * (length ** 3 - 2 * length * x ** 2 +
                                      x ** 3) / (24 * ei))
        return self._bounded(deflection, length)

    def get_bending_moment_equation(self, beam: Beam, load: float):
        w, length = load, beam.primary_span
        return self._bounded(
            lambda x: w / 2 * (length * x - x ** 2), length
        )

    def get_shear_force_equation(self, beam: Beam, load: float):
        w, length = load, beam.primary_span
        return self._bounded(lambda x: w * (length / 2 - x), length)
