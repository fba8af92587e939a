from sbeam.core.calc_methods.analyzer import Analyzer
from sbeam.core.calc_methods.simply_supported import SimplySupported
from sbeam.core.calc_methods.two_span_unequal import Reactions, TwoSpanUnequal

__all__ = [
    'Analyzer',
    'Reactions',
    'SimplySupported',
    'TwoSpanUnequal',
]
