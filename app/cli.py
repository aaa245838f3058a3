from __future__ import annotations

import logging
import signal
from pathlib import Path

import click

from core.orchestrator import run
from core.runtime import USAGE, ExitStatus

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
logger = logging.getLogger("go-dep-report")


def _exit_on_sigterm(signum, frame) -> None:
    # unwinds the temporary recipe directory; the default action would not
    logger.info("cli: received signal %s, stopping", signum)
    raise SystemExit(ExitStatus.FAILURE)


@click.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "allow_extra_args": True,
        "ignore_unknown_options": True,
    }
)
@click.argument("service_dir", required=False, type=click.Path(path_type=Path))
@click.argument("output_dir", required=False, type=click.Path(path_type=Path))
@click.pass_context
def main(ctx: click.Context, service_dir: Path | None, output_dir: Path | None) -> None:
    """Generate deps-report.md for a Go service and move it to OUTPUT_DIR."""
    if service_dir is None or output_dir is None:
        click.echo(USAGE, err=True)
        ctx.exit(ExitStatus.FAILURE)

    if ctx.args:
        logger.info("cli: ignoring extra arguments %s", ctx.args)

    previous = signal.signal(signal.SIGTERM, _exit_on_sigterm)
    try:
        status = run(service_dir, output_dir)
    finally:
        signal.signal(signal.SIGTERM, previous)
    ctx.exit(status)


if __name__ == "__main__":
    main()
