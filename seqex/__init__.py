from .errors import BadArgumentError
from .checks import is_sequence
from .sbase import Sequence, Source, MultiPass, SinglePass, compose
from .operators import *
from .operators import __all__ as _operators_all

__all__ = (
    'BadArgumentError', 'is_sequence',
    'Sequence', 'Source', 'MultiPass', 'SinglePass', 'compose',
) + _operators_all
