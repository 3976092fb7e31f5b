"""
Command Line Interface (CLI) with Click
"""

import logging
import sys

import click
from rich.console import Console

from sonarrpy.cli_config import (
    build_sonarr_client,
    load_config_from_args,
    setup_context,
)
from sonarrpy.commands import (
    calendar_command,
    delete_file_command,
    delete_series_command,
    diskspace_command,
    episodes_command,
    files_command,
    monitor_command,
    queue_command,
    series_command,
    status_command,
    tags_command,
    test_command,
    watch_command,
)
from sonarrpy.config import WATCH_UNITS, Config
from sonarrpy.exceptions import SonarrError
from sonarrpy.sonarr import SonarrClient
from sonarrpy.utils import setup_logging

logger = logging.getLogger(__name__)
console = Console()


def _fail(e: Exception):
    console.print(f"[red]Error:[/red] {e}")
    logger.debug("Command failed", exc_info=True)
    sys.exit(1)


@click.group()
@click.option(
    "--config", "-c", type=click.Path(exists=True), help="YAML configuration file"
)
@click.option(
    "--sonarr-url",
    envvar="SONARR_URL",
    help="Sonarr API URL (e.g., http://localhost:8989/api)",
)
@click.option("--sonarr-api-key", envvar="SONARR_API_KEY", help="Sonarr API key")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Log level (default: INFO)",
)
@click.pass_context
def cli(ctx, config, sonarr_url, sonarr_api_key, log_level):
    """sonarrctl - Inspect and manage a Sonarr server"""

    # Load and validate configuration
    cfg = load_config_from_args(config, sonarr_url, sonarr_api_key, log_level)

    # Setup logging
    setup_logging(cfg.log_level)

    sonarr_client = build_sonarr_client(cfg)

    # Setup context
    ctx.ensure_object(dict)
    ctx.obj.update(setup_context(cfg, sonarr_client))


@cli.command()
@click.pass_context
def status(ctx):
    """Show Sonarr version and system information"""
    sonarr: SonarrClient = ctx.obj["sonarr"]
    try:
        status_command(sonarr)
    except SonarrError as e:
        _fail(e)


@cli.command()
@click.pass_context
def test(ctx):
    """Test connection to Sonarr"""
    config: Config = ctx.obj["config"]
    sonarr: SonarrClient = ctx.obj["sonarr"]
    try:
        test_command(config, sonarr)
    except SonarrError as e:
        _fail(e)


@cli.command()
@click.option("--monitored", "-m", is_flag=True, help="Only monitored series")
@click.option("--limit", "-l", help="Limit to specific series (name or ID)")
@click.pass_context
def series(ctx, monitored, limit):
    """List series"""
    sonarr: SonarrClient = ctx.obj["sonarr"]
    try:
        series_command(sonarr, monitored_only=monitored, limit=limit)
    except SonarrError as e:
        _fail(e)


@cli.command()
@click.argument("series_id", type=int)
@click.pass_context
def episodes(ctx, series_id):
    """List the episodes of a series"""
    sonarr: SonarrClient = ctx.obj["sonarr"]
    try:
        episodes_command(sonarr, series_id)
    except SonarrError as e:
        _fail(e)


@cli.command()
@click.argument("series_id", type=int)
@click.pass_context
def files(ctx, series_id):
    """List the episode files of a series"""
    sonarr: SonarrClient = ctx.obj["sonarr"]
    try:
        files_command(sonarr, series_id)
    except SonarrError as e:
        _fail(e)


@cli.command()
@click.option("--start", "-s", default="", help="Start date (e.g., 2024-01-01)")
@click.option("--end", "-e", default="", help="End date (e.g., 2024-01-31)")
@click.pass_context
def calendar(ctx, start, end):
    """List episodes airing in a date range (default: today and tomorrow)"""
    sonarr: SonarrClient = ctx.obj["sonarr"]
    try:
        calendar_command(sonarr, start, end)
    except SonarrError as e:
        _fail(e)


@cli.command()
@click.pass_context
def diskspace(ctx):
    """Show free space of the drives seen by Sonarr"""
    sonarr: SonarrClient = ctx.obj["sonarr"]
    try:
        diskspace_command(sonarr)
    except SonarrError as e:
        _fail(e)


@cli.command()
@click.pass_context
def tags(ctx):
    """List tags"""
    sonarr: SonarrClient = ctx.obj["sonarr"]
    try:
        tags_command(sonarr)
    except SonarrError as e:
        _fail(e)


@cli.command()
@click.pass_context
def queue(ctx):
    """Show the download queue"""
    sonarr: SonarrClient = ctx.obj["sonarr"]
    try:
        queue_command(sonarr)
    except SonarrError as e:
        _fail(e)


@cli.command()
@click.option("--interval", type=int, help="Override watch interval from config")
@click.option(
    "--unit",
    type=click.Choice(WATCH_UNITS),
    help="Override watch unit from config",
)
@click.pass_context
def watch(ctx, interval, unit):
    """Show the download queue on a schedule"""
    config: Config = ctx.obj["config"]
    sonarr: SonarrClient = ctx.obj["sonarr"]

    # Use command-line args if provided, otherwise use config
    watch_interval = interval if interval is not None else config.watch_interval
    watch_unit = unit if unit is not None else config.watch_unit

    if watch_interval <= 0:
        console.print(f"[red]Invalid interval:[/red] {watch_interval}")
        sys.exit(1)

    watch_command(sonarr, watch_interval, watch_unit)


@cli.command()
@click.argument("episode_id", type=int)
@click.option("--off", is_flag=True, help="Unmonitor instead of monitor")
@click.pass_context
def monitor(ctx, episode_id, off):
    """Monitor (or unmonitor) an episode"""
    sonarr: SonarrClient = ctx.obj["sonarr"]
    try:
        monitor_command(sonarr, episode_id, monitored=not off)
    except SonarrError as e:
        _fail(e)


@cli.command("delete-series")
@click.argument("series_id", type=int)
@click.option(
    "--delete-files", is_flag=True, help="Also delete the series folder from disk"
)
@click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation")
@click.pass_context
def delete_series(ctx, series_id, delete_files, yes):
    """Delete a series from Sonarr"""
    sonarr: SonarrClient = ctx.obj["sonarr"]
    try:
        delete_series_command(sonarr, series_id, delete_files, yes)
    except SonarrError as e:
        _fail(e)


@cli.command("delete-file")
@click.argument("episode_file_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation")
@click.pass_context
def delete_file(ctx, episode_file_id, yes):
    """Delete an episode file (removes the media file from disk!)"""
    sonarr: SonarrClient = ctx.obj["sonarr"]
    try:
        delete_file_command(sonarr, episode_file_id, yes)
    except SonarrError as e:
        _fail(e)


def main():
    """Main entry point"""
    cli(obj={})


if __name__ == "__main__":
    main()
