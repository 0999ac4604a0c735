from pathlib import Path
from typing import List, Optional

import typer

from hemline.common import DumpFormatError, ViolationDumpAdapter, bus
from hemline.config import load_config_from_path
from hemline.spec import Severity, ViolationReport, sort_violations


def _emit(report: ViolationReport, flat: bool) -> None:
    violations = sort_violations(report) if flat else report.ordered()
    for violation in violations:
        if violation.severity is Severity.ERROR:
            bus.error(str(violation))
        else:
            bus.warning(str(violation))


def report_command(
    dumps: List[Path] = typer.Argument(
        ..., help="Violation dumps (YAML or JSON) written by analysis workers."
    ),
    fail_on: Optional[str] = typer.Option(
        None,
        "--fail-on",
        help="Lowest severity that makes the command exit with status 1 "
        "(error or warning). Overrides [tool.hemline] fail_on.",
    ),
    flat: bool = typer.Option(
        False,
        "--flat",
        help="Print in line/column order across all files instead of per file.",
    ),
    keep_duplicates: bool = typer.Option(
        False,
        "--keep-duplicates",
        help="Print identical violations reported by several workers.",
    ),
    files_analyzed: Optional[int] = typer.Option(
        None,
        "--files-analyzed",
        help="Number of files the workers analyzed, for the summary line.",
    ),
):
    try:
        # TOMLDecodeError is a ValueError as well.
        config = load_config_from_path(Path.cwd())
        threshold = Severity.parse(fail_on) if fail_on else config.fail_on
    except ValueError as e:
        bus.error(str(e))
        raise typer.Exit(code=1)

    adapter = ViolationDumpAdapter()
    report = ViolationReport()
    for dump in dumps:
        try:
            batch = adapter.load(dump)
        except DumpFormatError as e:
            bus.error("Cannot read violation dump: {reason}", reason=e)
            raise typer.Exit(code=1)
        bus.debug(
            "Loaded {count} violation(s) from {path}", count=len(batch), path=dump
        )
        report.extend(batch)

    if config.deduplicate and not keep_duplicates:
        report = report.deduplicated()

    _emit(report, flat=flat or not config.group_by_file)

    if files_analyzed is None:
        files_analyzed = report.files_with_violations
    summary = report.summary(files_analyzed)
    if report.exceeds(threshold):
        bus.error(summary)
        raise typer.Exit(code=1)
    if report:
        bus.warning(summary)
    else:
        bus.success(summary)
