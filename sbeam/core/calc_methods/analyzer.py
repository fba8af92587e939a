import abc
from dataclasses import dataclass

from sbeam.core.logger_mixin import LoggerMixin
from sbeam.core.postprocessing.results import Equation, PointSample
from sbeam.core.preprocessing.beam import Beam


@dataclass(eq=False)
class Analyzer(LoggerMixin, abc.ABC):
    r"""Base class of the closed-form analyzers, one per support condition.

    An analyzer builds three equations for a beam under a uniformly
    distributed load: deflection, bending moment and shear force. Each
    equation is a pure function of the position ``x`` returning a
    :any:`PointSample`, or ``None`` if ``x`` lies outside
    ``[0, total_span(beam)]``.

    Sign convention: the load is positive downward, sagging bending moments
    are positive, the shear force is the derivative of the bending moment
    and deflections are positive upward, so a downward load gives negative
    deflections.

    Parameters
    ----------
    deflection_scale : :any:`float`, default=1.0
        Factor applied to every deflection value, e.g. ``1000`` to report
        millimetres for lengths given in metres.
    debug : :any:`bool`, default=False
        Enables debug-level logging output.
    """

    deflection_scale: float = 1.0
    debug: bool = False

    def __post_init__(self):
        self.logger.debug(
            f"{type(self).__name__} ready, deflection_scale="
            f"{self.deflection_scale}"
        )

    @abc.abstractmethod
    def total_span(self, beam: Beam) -> float:
        """End of the domain of all equations for :py:attr:`beam`."""

    @abc.abstractmethod
    def get_deflection_equation(self, beam: Beam, load: float) -> Equation:
        pass

    @abc.abstractmethod
    def get_bending_moment_equation(self, beam: Beam, load: float
                                    ) -> Equation:
        pass

    @abc.abstractmethod
    def get_shear_force_equation(self, beam: Beam, load: float) -> Equation:
        pass

    @staticmethod
    def _bounded(func, end: float) -> Equation:
        """Wraps ``func`` so that it is only evaluated on ``[0, end]``."""
        def equation(x):
            if 0 <= x <= end:
                return PointSample(x, float(func(x)))
            return None
        return equation
