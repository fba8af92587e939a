from sbeam.core import calc_methods, postprocessing, preprocessing, solution
from sbeam.core.calc_methods import *  # noqa: F401, F403
from sbeam.core.exceptions import (
    InvalidCondition, InvalidGeometry, InvalidMaterial, SBeamError
)
from sbeam.core.postprocessing import *  # noqa: F401, F403
from sbeam.core.preprocessing import *  # noqa: F401, F403
from sbeam.core.solution import *  # noqa: F401, F403

__all__ = [
    'calc_methods',
    'InvalidCondition',
    'InvalidGeometry',
    'InvalidMaterial',
    'postprocessing',
    'preprocessing',
    'SBeamError',
    'solution',
]
