from dataclasses import dataclass

from sbeam.core.calc_methods.analyzer import Analyzer
from sbeam.core.calc_methods.simply_supported import SimplySupported
from sbeam.core.calc_methods.two_span_unequal import TwoSpanUnequal
from sbeam.core.exceptions import InvalidCondition
from sbeam.core.logger_mixin import LoggerMixin
from sbeam.core.postprocessing.results import EquationResult
from sbeam.core.preprocessing.beam import Beam


@dataclass(eq=False)
class BeamAnalysis(LoggerMixin):
    """Dispatches beam analyses to the analyzer of a support condition.

    One analyzer instance is held per condition name. Every query builds a
    new equation, nothing is cached. Queries have to name their condition,
    an omitted or unregistered one raises :any:`InvalidCondition`.

    Parameters
    ----------
    analyzer : :any:`dict`, optional
        Mapping of condition names to :any:`Analyzer` instances. Defaults to
        ``'simply-supported'`` and ``'two-span-unequal'``.
    debug : :any:`bool`, default=False
        Enables debug-level logging output.

    Examples
    --------
    >>> from sbeam import Beam, BeamAnalysis, Material
    >>> beam = Beam(3, 5, Material('timber', {'EI': 1500}))
    >>> analysis = BeamAnalysis()
    >>> shear = analysis.get_shear_force(beam, 5, 'two-span-unequal')
    >>> shear.equation(0)
    PointSample(x=0, y=3.5416666666666665)
    """

    analyzer: dict[str, Analyzer] | None = None
    debug: bool = False

    def __post_init__(self):
        if self.analyzer is None:
            self.analyzer = {
                'simply-supported': SimplySupported(debug=self.debug),
                'two-span-unequal': TwoSpanUnequal(debug=self.debug),
            }
        else:
            self.analyzer = dict(self.analyzer)
        for name, analyzer in self.analyzer.items():
            self._check_analyzer(name, analyzer)
        self.logger.debug(
            f"Registered conditions: {', '.join(self.conditions)}"
        )

    @property
    def conditions(self) -> tuple[str, ...]:
        """Names of all registered conditions."""
        return tuple(self.analyzer)

    @staticmethod
    def _check_analyzer(name, analyzer):
        if not isinstance(name, str):
            raise TypeError('condition names have to be strings.')
        if not isinstance(analyzer, Analyzer):
            raise TypeError(
                f'analyzer for {name!r} has to be an instance of Analyzer, '
                f'got {type(analyzer).__name__}.'
            )

    def register(self, condition: str, analyzer: Analyzer):
        """Registers ``analyzer`` under ``condition``, replacing any
        analyzer registered under the same name."""
        self._check_analyzer(condition, analyzer)
        if condition in self.analyzer:
            self.logger.warning(f"Replacing analyzer of {condition!r}")
        self.analyzer[condition] = analyzer

    def _get_analyzer(self, condition: str | None) -> Analyzer:
        # a missing condition is rejected like an unknown one
        analyzer = None
        if isinstance(condition, str):
            analyzer = self.analyzer.get(condition)
        if analyzer is None:
            self.logger.error(f"Invalid condition {condition!r}")
            raise InvalidCondition(condition, self.conditions)
        self.logger.debug(
            f"Dispatching {condition!r} to {type(analyzer).__name__}"
        )
        return analyzer

    def _result(self, analyzer, beam, load, equation):
        return EquationResult(
            beam=beam, load=load, equation=equation,
            total_span=analyzer.total_span(beam),
        )

    def get_deflection(self, beam: Beam, load: float,
                       condition: str | None = None) -> EquationResult:
        """Deflection curve of ``beam`` under the uniform ``load``."""
        analyzer = self._get_analyzer(condition)
        return self._result(
            analyzer, beam, load, analyzer.get_deflection_equation(beam, load)
        )

    def get_bending_moment(self, beam: Beam, load: float,
                           condition: str | None = None) -> EquationResult:
        """Bending moment curve of ``beam`` under the uniform ``load``."""
        analyzer = self._get_analyzer(condition)
        return self._result(
            analyzer, beam, load,
            analyzer.get_bending_moment_equation(beam, load)
        )

    def get_shear_force(self, beam: Beam, load: float,
                        condition: str | None = None) -> EquationResult:
        """Shear force curve of ``beam`` under the uniform ``load``."""
        analyzer = self._get_analyzer(condition)
        return self._result(
            analyzer, beam, load, analyzer.get_shear_force_equation(beam, load)
        )
