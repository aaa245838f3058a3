from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

import click

from .errors import BuildError, OutputPreparationError, RelocationError, ReportError
from .recipe import materialize_recipe
from .runtime import BUILD_TOOL, REPORT_ACTION, ExitStatus, ReportRun

logger = logging.getLogger("go-dep-report")


class ReportOrchestrator:
    def __init__(self, target_dir: Path | str, output_dir: Path | str) -> None:
        self.state = ReportRun(target_dir=Path(target_dir), output_dir=Path(output_dir))

    def generate(self) -> Path:
        """Build the report in the target directory and move it to the output directory."""
        logger.info("generate: target=%s output=%s", self.state.target_dir, self.state.output_dir)
        with materialize_recipe() as recipe_path:
            self.state.recipe_path = recipe_path
            self._invoke_build(recipe_path)

        self._prepare_output()
        self.state.report_path = self._relocate_report()
        return self.state.report_path

    def _invoke_build(self, recipe_path: Path) -> None:
        error_message = f"Error running {BUILD_TOOL} {REPORT_ACTION}"
        executable = shutil.which(BUILD_TOOL)
        if executable is None:
            raise BuildError(error_message, f"'{BUILD_TOOL}' not found on PATH")

        # stdout/stderr are inherited so the recipe's output streams live
        args = [executable, "-f", str(recipe_path), REPORT_ACTION]
        logger.info("build: %s (cwd=%s)", " ".join(args), self.state.target_dir)
        try:
            subprocess.run(args, cwd=str(self.state.target_dir), check=True)
        except subprocess.CalledProcessError as e:
            raise BuildError(error_message, f"exit status {e.returncode}", returncode=e.returncode) from e
        except OSError as e:
            raise BuildError(error_message, e) from e

    def _prepare_output(self) -> None:
        output_dir = self.state.output_dir
        logger.info("prepare_output: %s", output_dir)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputPreparationError("Error creating output directory", e) from e

    def _relocate_report(self) -> Path:
        source = self.state.source_report
        dest = self.state.dest_report
        if not source.is_file():
            raise RelocationError("Error moving report", f"{source} was not produced by {BUILD_TOOL} {REPORT_ACTION}")

        # rename only; a cross-device move fails instead of copying
        try:
            source.replace(dest)
        except OSError as e:
            raise RelocationError("Error moving report", e) from e
        logger.info("relocate: %s -> %s", source, dest)
        return dest


def run(target_dir: Path | str, output_dir: Path | str) -> ExitStatus:
    try:
        report_path = ReportOrchestrator(target_dir, output_dir).generate()
    except ReportError as e:
        click.echo(str(e), err=True)
        return ExitStatus.FAILURE

    click.echo(f"Report generated at: {report_path}")
    return ExitStatus.SUCCESS
