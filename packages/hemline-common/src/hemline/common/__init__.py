__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .messaging.bus import MessageBus
from .adapters.dump_adapter import DumpFormatError, ViolationDumpAdapter

# Global singleton; the CLI installs the renderer at startup.
bus = MessageBus()

__all__ = [
    "bus",
    "MessageBus",
    "DumpFormatError",
    "ViolationDumpAdapter",
]
