"""
List commands - Render series, episodes, files, calendar, tags and disk space
"""

import logging

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from sonarrpy.models import Series
from sonarrpy.sonarr import SonarrClient
from sonarrpy.utils import format_episode_info, format_size

logger = logging.getLogger(__name__)
console = Console()


def _yes_no(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


def filter_series(series_list: list[Series], limit: str | None) -> list[Series]:
    """Keep series matching ``limit`` (numeric ID or part of the title)"""
    if not limit:
        return series_list
    if limit.isdigit():
        return [s for s in series_list if s.id == int(limit)]
    return [s for s in series_list if limit.lower() in s.title.lower()]


def series_command(
    sonarr: SonarrClient, monitored_only: bool = False, limit: str | None = None
) -> None:
    """Display all series known to Sonarr"""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Fetching series...", total=None)
        if monitored_only:
            series_list = sonarr.get_monitored_series()
        else:
            series_list = sonarr.get_all_series()
        progress.update(task, completed=True)

    series_list = filter_series(series_list, limit)
    if not series_list:
        console.print("[yellow]No series found[/yellow]")
        return

    table = Table(title=f"Series ({len(series_list)})")
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Year")
    table.add_column("Monitored")
    table.add_column("Episodes", style="blue")
    table.add_column("Size", style="cyan")

    total_size = 0
    for series in series_list:
        total_size += series.size_on_disk
        table.add_row(
            str(series.id),
            series.title,
            str(series.year) if series.year else "-",
            _yes_no(series.monitored),
            f"{series.episode_file_count}/{series.episode_count}",
            format_size(series.size_on_disk),
        )

    console.print(table)
    if total_size > 0:
        console.print(
            f"\n[bold cyan]Total size:[/bold cyan] {format_size(total_size)}"
        )


def episodes_command(sonarr: SonarrClient, series_id: int) -> None:
    """Display the episodes of one series"""
    series = sonarr.get_series(series_id)
    episodes = sonarr.get_episodes(series_id)

    if not episodes:
        console.print(f"[yellow]No episodes found for {series.title}[/yellow]")
        return

    table = Table(title=f"{series.title} ({len(episodes)} episodes)")
    table.add_column("ID", style="cyan")
    table.add_column("Episode", style="green")
    table.add_column("Air date")
    table.add_column("Monitored")
    table.add_column("File")

    for ep in episodes:
        table.add_row(
            str(ep.id),
            format_episode_info(
                series.title, ep.season_number, ep.episode_number, ep.title
            ),
            ep.air_date or "-",
            _yes_no(ep.monitored),
            _yes_no(ep.has_file),
        )

    console.print(table)


def files_command(sonarr: SonarrClient, series_id: int) -> None:
    """Display the episode files of one series"""
    files = sonarr.get_episode_files(series_id)

    if not files:
        console.print(f"[yellow]No episode files found for series {series_id}[/yellow]")
        return

    table = Table(title=f"Episode files of series {series_id} ({len(files)})")
    table.add_column("ID", style="cyan")
    table.add_column("Season")
    table.add_column("Path", style="dim")
    table.add_column("Quality", style="magenta")
    table.add_column("Size", style="cyan")

    total_size = 0
    for f in files:
        total_size += f.size
        table.add_row(
            str(f.id),
            str(f.season_number),
            f.relative_path or f.path,
            f.quality.quality.name or "-",
            format_size(f.size),
        )

    console.print(table)
    console.print(f"\n[bold cyan]Total size:[/bold cyan] {format_size(total_size)}")


def calendar_command(sonarr: SonarrClient, start: str = "", end: str = "") -> None:
    """Display upcoming and recently aired episodes"""
    entries = sonarr.get_calendar(start, end)

    if not entries:
        console.print("[yellow]Nothing on the calendar[/yellow]")
        return

    table = Table(title=f"Calendar ({len(entries)})")
    table.add_column("Air date")
    table.add_column("Episode", style="green")
    table.add_column("Monitored")
    table.add_column("File")

    for entry in entries:
        table.add_row(
            entry.air_date or "-",
            format_episode_info(
                entry.series.title or str(entry.series_id),
                entry.season_number,
                entry.episode_number,
                entry.title,
            ),
            _yes_no(entry.monitored),
            _yes_no(entry.has_file),
        )

    console.print(table)


def diskspace_command(sonarr: SonarrClient) -> None:
    """Display free space of the drives seen by Sonarr"""
    disks = sonarr.get_disk_space()

    table = Table(title="Disk space")
    table.add_column("Path", style="green")
    table.add_column("Label", style="dim")
    table.add_column("Free", style="cyan")
    table.add_column("Total", style="cyan")
    table.add_column("Used")

    for disk in disks:
        if disk.total_space > 0:
            used = f"{(disk.total_space - disk.free_space) * 100 / disk.total_space:.1f}%"
        else:
            used = "-"
        table.add_row(
            disk.path,
            disk.label or "-",
            format_size(disk.free_space),
            format_size(disk.total_space),
            used,
        )

    console.print(table)


def tags_command(sonarr: SonarrClient) -> None:
    """Display all tags"""
    tags = sonarr.get_tags()

    if not tags:
        console.print("[yellow]No tags defined[/yellow]")
        return

    table = Table(title=f"Tags ({len(tags)})")
    table.add_column("ID", style="cyan")
    table.add_column("Label", style="green")
    for tag in tags:
        table.add_row(str(tag.id), tag.label)

    console.print(table)
