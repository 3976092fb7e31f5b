"""
Edit commands - Change monitoring and delete series or episode files
"""

import logging

import click
from rich.console import Console

from sonarrpy.sonarr import SonarrClient
from sonarrpy.utils import format_episode_info, format_size

logger = logging.getLogger(__name__)
console = Console()


def monitor_command(sonarr: SonarrClient, episode_id: int, monitored: bool) -> None:
    """Set the monitored flag of one episode"""
    episode = sonarr.get_episode(episode_id)
    series = sonarr.get_series(episode.series_id)
    label = format_episode_info(
        series.title or str(episode.series_id),
        episode.season_number,
        episode.episode_number,
        episode.title,
    )

    if episode.monitored == monitored:
        state = "monitored" if monitored else "unmonitored"
        console.print(f"[dim]{label} is already {state}[/dim]")
        return

    episode.monitored = monitored
    updated = sonarr.update_episode(episode)

    # the server decides what was stored, report that
    if updated.monitored == monitored:
        state = (
            "[green]monitored[/green]" if monitored else "[yellow]unmonitored[/yellow]"
        )
        console.print(f"✓ {label} is now {state}")
    else:
        console.print(f"[red]✗ Sonarr did not apply the change to {label}[/red]")


def delete_series_command(
    sonarr: SonarrClient, series_id: int, delete_files: bool, assume_yes: bool
) -> None:
    """Delete a series, optionally with its files"""
    series = sonarr.get_series(series_id)

    if not assume_yes:
        prompt = f"Delete series '{series.title}' ({series.id})"
        if delete_files:
            prompt += f" AND its files ({format_size(series.size_on_disk)}) from disk"
        if not click.confirm(f"{prompt}?"):
            console.print("[yellow]Aborted[/yellow]")
            return

    deleted = sonarr.delete_series(series_id, delete_files=delete_files)
    logger.info(f"Deleted series {series_id} (delete_files={delete_files})")
    console.print(f"[green]✓ Deleted series {deleted.title or series.title}[/green]")


def delete_file_command(
    sonarr: SonarrClient, episode_file_id: int, assume_yes: bool
) -> None:
    """Delete an episode file from disk"""
    episode_file = sonarr.get_episode_file(episode_file_id)

    if not assume_yes:
        if not click.confirm(
            f"Delete '{episode_file.path}' ({format_size(episode_file.size)}) from disk?"
        ):
            console.print("[yellow]Aborted[/yellow]")
            return

    sonarr.delete_episode_file(episode_file_id)
    logger.info(f"Deleted episode file {episode_file_id}")
    console.print(f"[green]✓ Deleted {episode_file.path}[/green]")
