from .bus import SpyBus
from .helpers import write_dump

__all__ = ["SpyBus", "write_dump"]
