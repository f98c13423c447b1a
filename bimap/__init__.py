from .core import BiMap, NotFound
from .ordering import Ordering

__version__ = "0.1"

__all__ = ["BiMap", "NotFound", "Ordering"]
