from . import sources, funcs, memo, branches, multi, eager

from .sources import *
from .funcs import *
from .memo import *
from .branches import *
from .multi import *
from .eager import *

__all__ = (
    sources.__all__ + funcs.__all__ + memo.__all__ +
    branches.__all__ + multi.__all__ + eager.__all__
)
