from __future__ import annotations

from ._core import *
from ._core import (  # for the docs
    __all__,
    __version__,
    _ImmutableBase,
)
