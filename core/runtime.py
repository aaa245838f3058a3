from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

REPORT_FILE = "deps-report.md"
REPORT_ACTION = "deps-report"
BUILD_TOOL = "make"
RECIPE_NAME = "Makefile"
USAGE = "Usage: go-dep-report <go-service-dir> <output-dir>"


class ExitStatus(IntEnum):
    SUCCESS = 0
    FAILURE = 1


@dataclass(slots=True)
class ReportRun:
    target_dir: Path
    output_dir: Path
    recipe_path: Path | None = None
    report_path: Path | None = None

    @property
    def source_report(self) -> Path:
        return self.target_dir / REPORT_FILE

    @property
    def dest_report(self) -> Path:
        return self.output_dir / REPORT_FILE
