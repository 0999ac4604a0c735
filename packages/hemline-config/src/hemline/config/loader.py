import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from hemline.spec import Severity

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

log = logging.getLogger(__name__)


@dataclass
class HemlineConfig:
    fail_on: Severity = Severity.ERROR
    group_by_file: bool = True
    deduplicate: bool = True


def _find_pyproject_toml(search_path: Path) -> Path:
    current_dir = search_path.resolve()
    while True:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        if current_dir.parent == current_dir:
            break
        current_dir = current_dir.parent
    raise FileNotFoundError("Could not find pyproject.toml in any parent directory.")


def _get_bool(data: Dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(
            f"[tool.hemline] {key} must be true or false, got {value!r}"
        )
    return value


def load_config_from_path(search_path: Path) -> HemlineConfig:
    try:
        config_path = _find_pyproject_toml(search_path)
    except FileNotFoundError:
        return HemlineConfig()

    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    hemline_data: Dict[str, Any] = data.get("tool", {}).get("hemline", {})
    log.debug(f"Loaded [tool.hemline] from {config_path}: {hemline_data}")

    defaults = HemlineConfig()
    fail_on = defaults.fail_on
    if "fail_on" in hemline_data:
        value = hemline_data["fail_on"]
        if not isinstance(value, str):
            raise ValueError(f"[tool.hemline] fail_on must be a string, got {value!r}")
        try:
            fail_on = Severity.parse(value)
        except ValueError as e:
            raise ValueError(f"[tool.hemline] fail_on: {e}") from None

    return HemlineConfig(
        fail_on=fail_on,
        group_by_file=_get_bool(
            hemline_data, "group_by_file", defaults.group_by_file
        ),
        deduplicate=_get_bool(hemline_data, "deduplicate", defaults.deduplicate),
    )
