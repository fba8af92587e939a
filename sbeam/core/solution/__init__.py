from sbeam.core.solution.beam_analysis import BeamAnalysis

__all__ = [
    'BeamAnalysis',
]
