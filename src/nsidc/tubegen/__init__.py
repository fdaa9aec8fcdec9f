__version__ = "v0.1.0"


__all__ = [
    "__version__",
    "builders",
    "cli",
    "config",
    "constants",
    "geodesy",
    "models",
    "normalization",
    "tubegen",
]

from . import constants
from . import models
from . import normalization
from . import geodesy
from . import builders
from . import config
from . import tubegen
from . import cli
