from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from sbeam.core.logger_mixin import table_samples
from sbeam.core.preprocessing.beam import Beam


@dataclass(frozen=True)
class PointSample:
    """A single evaluated point ``(x, y)`` of a response curve."""

    x: float
    y: float


Equation = Callable[[float], Optional[PointSample]]


@dataclass(eq=False)
class EquationResult:
    r"""Response curve of a beam returned by the analysis engine.

    Parameters
    ----------
    beam : :any:`Beam`
        The analysed beam.
    load : :any:`float`
        The uniformly distributed load the curve was built for.
    equation : :any:`callable`
        Pure function of the position ``x``. Returns a :any:`PointSample`
        inside the domain and ``None`` outside of it.
    total_span : :any:`float`, optional
        End of the domain of :py:attr:`equation`. Defaults to the total span
        of :py:attr:`beam`.

    Examples
    --------
    >>> from sbeam import Beam, BeamAnalysis, Material
    >>> beam = Beam(4, 0, Material('steel', {'E': 200000, 'I': 0.0001}))
    >>> analysis = BeamAnalysis()
    >>> result = analysis.get_bending_moment(beam, 10, 'simply-supported')
    >>> result.equation(2)
    PointSample(x=2, y=20.0)
    >>> result.equation(5) is None
    True
    """

    beam: Beam
    load: float
    equation: Equation
    total_span: float | None = None

    def __post_init__(self):
        if self.total_span is None:
            self.total_span = self.beam.total_span

    def sample(self, step: float = 0.1):
        r"""Samples :py:attr:`equation` from ``0`` to :py:attr:`total_span`.

        The end of the domain is always included. Positions for which the
        equation returns ``None`` are dropped.

        Parameters
        ----------
        step : :any:`float`, default=0.1
            Increment between two sample positions.

        Returns
        -------
        :any:`tuple` of :any:`numpy.ndarray`
            Sample positions and the corresponding values.

        Raises
        ------
        ValueError
            :py:attr:`step` has to be greater than zero.
        """
        if not step > 0:
            raise ValueError('step has to be greater than zero.')
        positions = np.arange(0.0, self.total_span, step)
        positions = positions[positions < self.total_span - 1e-9 * step]
        positions = np.append(positions, self.total_span)
        points = [self.equation(float(x)) for x in positions]
        points = [p for p in points if p is not None]
        return (np.array([p.x for p in points], dtype=float),
                np.array([p.y for p in points], dtype=float))

    def extreme(self, step: float = 0.01):
        """Sample with the largest absolute value on the sampling grid."""
        xs, ys = self.sample(step)
        if not len(ys):
            raise ValueError('no samples in the domain.')
        i = int(np.argmax(np.abs(ys)))
        return PointSample(float(xs[i]), float(ys[i]))

    def table(self, step: float = 0.5, decimals: int = 6):
        """Sampled curve as a grid table."""
        xs, ys = self.sample(step)
        return table_samples(xs, ys, decimals=decimals)
