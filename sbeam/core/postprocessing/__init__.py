from sbeam.core.postprocessing.results import (
    Equation, EquationResult, PointSample
)


__all__ = [
    'Equation',
    'EquationResult',
    'PointSample',
]
