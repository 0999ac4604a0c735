import logging
from pathlib import Path
from typing import Any, Iterable, List

import yaml

from hemline.spec import ViolationMessage

log = logging.getLogger(__name__)


class DumpFormatError(ValueError):
    pass


class ViolationDumpAdapter:
    """
    Reads and writes violation dumps produced by analysis workers.

    A dump is a YAML document holding either a list of violation mappings or
    a mapping with a `violations` list. JSON output is accepted as well since
    it is valid YAML.
    """

    def load(self, path: Path) -> List[ViolationMessage]:
        if not path.exists():
            log.debug(f"Dump {path} does not exist, treating as empty.")
            return []

        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise DumpFormatError(f"{path}: not a valid YAML/JSON document") from e
        except UnicodeDecodeError as e:
            raise DumpFormatError(f"{path}: not UTF-8 encoded") from e
        except OSError as e:
            raise DumpFormatError(f"{path}: cannot be read ({e.strerror})") from e

        if content is None:
            return []
        if isinstance(content, dict):
            content = content.get("violations", [])
        if not isinstance(content, list):
            raise DumpFormatError(f"{path}: expected a list of violations")

        return list(self._parse_entries(path, content))

    def _parse_entries(self, path: Path, entries: List[Any]):
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                log.warning(f"Skipping entry {index} in {path}: not a mapping")
                continue
            try:
                yield ViolationMessage.from_dict(entry)
            except (KeyError, TypeError, ValueError) as e:
                log.warning(f"Skipping malformed entry {index} in {path}: {e!r}")

    def dump(self, violations: Iterable[ViolationMessage]) -> str:
        return yaml.safe_dump(
            [v.to_dict() for v in violations],
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )

    def save(self, path: Path, violations: Iterable[ViolationMessage]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            f.write(self.dump(violations))
