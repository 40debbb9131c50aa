from __future__ import annotations

from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console

from fsinfo import __version__
from fsinfo.collectors.mounts import find_mount
from fsinfo.collectors.volume import read_volume_stats
from fsinfo.config import load_config
from fsinfo.errors import FsInfoError, UsageError
from fsinfo.reporter import build_report, render_table, render_text

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"getfsinfo {__version__}")
        raise typer.Exit()


def _debug(verbose: bool, msg: str) -> None:
    if verbose:
        typer.echo(f"[getfsinfo] {msg}", err=True)


def _die(msg: str) -> NoReturn:
    typer.echo(msg, err=True)
    raise typer.Exit(code=1)


@app.command()
def main(
    ctx: typer.Context,
    files: Optional[List[str]] = typer.Argument(None, metavar="FILE...", show_default=False),
    raw_bytes: Optional[bool] = typer.Option(
        None, "--bytes/--no-bytes", "-b/-B", help="Show sizes in bytes instead of 1.50K style.", show_default=False
    ),
    pretty: bool = typer.Option(False, "--pretty", "-p", help="Render each report as a table."),
    literal_prefix: Optional[bool] = typer.Option(
        None,
        "--literal-prefix/--no-literal-prefix",
        show_default=False,
        help="Match mount points as raw string prefixes (/da also matches /database).",
    ),
    mount_table: Optional[Path] = typer.Option(
        None, "--mount-table", help="Read mounts from this file instead of /proc/mounts."
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Alternative config.yaml."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print diagnostics on stderr."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Show filesystem information (device, mount, size, free space) for each FILE."""
    if not files:
        progname = ctx.find_root().info_name or "getfsinfo"
        _die(f"usage: {progname} <file> [<file> ...]")

    try:
        cfg = load_config(config)
    except UsageError as e:
        _die(str(e))

    mounts_file = str(mount_table) if mount_table is not None else cfg.mounts_file
    # an explicit flag beats the config file
    literal = cfg.literal_prefix if literal_prefix is None else literal_prefix
    raw = cfg.raw_bytes if raw_bytes is None else raw_bytes
    _debug(verbose, f"mount table: {mounts_file} (literal prefix: {'yes' if literal else 'no'})")

    console = Console(highlight=False) if pretty else None

    for path in files:
        try:
            stats = read_volume_stats(path)
            mount = find_mount(path, mounts_file=mounts_file, literal_prefix=literal)
        except FsInfoError as e:
            _die(str(e))

        _debug(verbose, f"{path} -> {mount.mount_point} ({mount.source})")
        report = build_report(path, mount, stats)
        if console is not None:
            console.print(render_table(report, raw=raw))
        else:
            typer.echo(render_text(report, raw=raw))


def run_cli() -> None:
    app(prog_name="getfsinfo")


if __name__ == "__main__":
    run_cli()
