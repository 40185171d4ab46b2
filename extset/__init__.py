from extset.errors import InvalidArgument
from extset.extended_set import (
    ExtendedSet, complement_of, empty, full, of,
)

__all__ = [
    'ExtendedSet', 'InvalidArgument',
    'complement_of', 'empty', 'full', 'of',
]
