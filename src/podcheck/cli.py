"""Command-line entry point: ``podcheck FILE [FILE...]``.

Thin wrapper over :class:`podcheck.service.checker.ManifestChecker`.
Diagnostics go to stderr as ``<file>:<line> <message>``; the exit status is
1 when any file has diagnostics and 0 otherwise.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from podcheck import __version__
from podcheck.service.checker import ManifestChecker
from podcheck.settings import Settings

logger = logging.getLogger("podcheck.cli")


@click.command("podcheck")
@click.version_option(version=__version__, prog_name="podcheck")
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Diagnostics as text lines on stderr, or a JSON report on stdout.",
)
@click.option("--log-level", default=None, help="Override LOG_LEVEL from the environment.")
def main(files: tuple[Path, ...], output_format: str, log_level: str | None) -> None:
    """Validate Pod manifests and report every violation with its line."""
    settings = Settings()
    logging.basicConfig(level=(log_level or settings.log_level).upper())

    checker = ManifestChecker()
    results = [checker.check_file(path) for path in files]

    if output_format == "json":
        report = [
            {**result.model_dump(), "rendered": result.rendered} for result in results
        ]
        click.echo(json.dumps(report, indent=2))
    else:
        for result in results:
            for line in result.rendered:
                click.echo(line, err=True)

    failed = [r.filename for r in results if not r.valid]
    if failed:
        logger.info("%d of %d file(s) failed validation", len(failed), len(results))
        sys.exit(1)


if __name__ == "__main__":
    main()
