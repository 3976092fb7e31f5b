"""
Queue command - Display downloads in progress, once or on a schedule
"""

import logging
import sys
import time

import schedule
from rich.console import Console
from rich.table import Table

from sonarrpy.exceptions import SonarrError
from sonarrpy.sonarr import SonarrClient
from sonarrpy.utils import format_episode_info, format_progress, format_size

logger = logging.getLogger(__name__)
console = Console()


def queue_command(sonarr: SonarrClient) -> None:
    """Display the download queue"""
    items = sonarr.get_queue()

    if not items:
        console.print("[yellow]Download queue is empty[/yellow]")
        return

    table = Table(title=f"Download queue ({len(items)})")
    table.add_column("ID", style="cyan")
    table.add_column("Episode", style="green")
    table.add_column("Status")
    table.add_column("Progress", style="blue")
    table.add_column("Left", style="cyan")
    table.add_column("Protocol", style="dim")

    for item in items:
        status = item.status
        if item.status_messages:
            status = f"[yellow]{status} (!)[/yellow]"
        table.add_row(
            str(item.id),
            format_episode_info(
                item.series.title,
                item.episode.season_number,
                item.episode.episode_number,
                item.episode.title,
            ),
            status,
            format_progress(item.size, item.size_left),
            format_size(item.size_left),
            item.protocol or "-",
        )

    console.print(table)


def watch_command(sonarr: SonarrClient, interval: int, unit: str) -> None:
    """Render the queue every ``interval`` ``unit`` until interrupted"""
    console.print(f"[bold cyan]Watching queue every {interval} {unit}[/bold cyan]")
    console.print("Press Ctrl+C to stop\n")

    def refresh():
        console.print(
            f"\n[bold blue]Queue at {time.strftime('%Y-%m-%d %H:%M:%S')}[/bold blue]"
        )
        try:
            queue_command(sonarr)
        except SonarrError as e:
            console.print(f"[red]Error fetching queue:[/red] {e}")
            logger.warning(f"Queue refresh failed: {e}")

    job = schedule.every(interval)
    if unit == "seconds":
        job.seconds.do(refresh)
    elif unit == "minutes":
        job.minutes.do(refresh)
    elif unit == "hours":
        job.hours.do(refresh)

    refresh()

    try:
        while True:
            schedule.run_pending()
            time.sleep(1)
    except KeyboardInterrupt:
        console.print("\n\n[yellow]Watch stopped by user[/yellow]")
        schedule.clear()
        sys.exit(0)
