__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .violations import (
    Severity,
    ViolationMessage,
    compare_violations,
    sort_violations,
)
from .report import ViolationReport

__all__ = [
    "Severity",
    "ViolationMessage",
    "compare_violations",
    "sort_violations",
    "ViolationReport",
]
