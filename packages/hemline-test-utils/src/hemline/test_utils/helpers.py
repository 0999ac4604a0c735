from pathlib import Path
from typing import Iterable

from hemline.common import ViolationDumpAdapter
from hemline.spec import ViolationMessage


def write_dump(path: Path, violations: Iterable[ViolationMessage]) -> Path:
    ViolationDumpAdapter().save(path, violations)
    return path
