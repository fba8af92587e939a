
from sbeam.core import (
    Analyzer, Beam, BeamAnalysis, Equation, EquationResult, InvalidCondition,
    InvalidGeometry, InvalidMaterial, Material, PointSample, Reactions,
    SBeamError, SimplySupported, TwoSpanUnequal
)

__all__ = [
    'Analyzer',
    'Beam',
    'BeamAnalysis',
    'Equation',
    'EquationResult',
    'InvalidCondition',
    'InvalidGeometry',
    'InvalidMaterial',
    'Material',
    'PointSample',
    'Reactions',
    'SBeamError',
    'SimplySupported',
    'TwoSpanUnequal',
]
