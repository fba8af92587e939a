from sbeam.core.preprocessing.beam import Beam
from sbeam.core.preprocessing.material import Material


__all__ = [
    'Beam',
    'Material',
]
