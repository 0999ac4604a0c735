from pathlib import Path
from textwrap import dedent

import pytest

from hemline.config import HemlineConfig, load_config_from_path
from hemline.spec import Severity


def test_load_config_reads_tool_table_from_parent(tmp_path: Path):
    (tmp_path / "pyproject.toml").write_text(
        dedent("""
        [tool.hemline]
        fail_on = "warning"
        group_by_file = false
    """)
    )
    nested = tmp_path / "src" / "app"
    nested.mkdir(parents=True)

    config = load_config_from_path(nested)

    assert config.fail_on is Severity.WARNING
    assert config.group_by_file is False
    assert config.deduplicate is True


def test_load_config_defaults_without_table(tmp_path: Path):
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'other'\n")

    assert load_config_from_path(tmp_path) == HemlineConfig()


def test_load_config_rejects_unknown_severity(tmp_path: Path):
    (tmp_path / "pyproject.toml").write_text('[tool.hemline]\nfail_on = "fatal"\n')

    with pytest.raises(ValueError, match="fatal"):
        load_config_from_path(tmp_path)


@pytest.mark.parametrize(
    "line, key",
    [
        ('group_by_file = "false"', "group_by_file"),
        ("deduplicate = 0", "deduplicate"),
        ('fail_on = ""', "fail_on"),
        ("fail_on = 1", "fail_on"),
    ],
)
def test_load_config_rejects_badly_typed_values(tmp_path: Path, line: str, key: str):
    (tmp_path / "pyproject.toml").write_text(f"[tool.hemline]\n{line}\n")

    with pytest.raises(ValueError, match=rf"\[tool.hemline\] {key}"):
        load_config_from_path(tmp_path)


def test_load_config_accepts_real_booleans(tmp_path: Path):
    (tmp_path / "pyproject.toml").write_text(
        "[tool.hemline]\ngroup_by_file = false\ndeduplicate = false\n"
    )

    config = load_config_from_path(tmp_path)

    assert config.group_by_file is False
    assert config.deduplicate is False
