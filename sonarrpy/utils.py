"""
Miscellaneous utilities
"""

import logging


def setup_logging(log_level: str = "INFO"):
    """Configure logging system"""
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def format_episode_info(
    series_title: str, season: int, episode: int, title: str
) -> str:
    """Format episode information for display"""
    return f"{series_title} - S{season:02d}E{episode:02d} - {title}"


def format_size(size: int) -> str:
    """Format a byte count for display ("-" when empty)"""
    if size <= 0:
        return "-"
    if size >= 1024**4:  # TB
        return f"{size / (1024**4):.2f} TB"
    if size >= 1024**3:  # GB
        return f"{size / (1024**3):.2f} GB"
    if size >= 1024**2:  # MB
        return f"{size / (1024**2):.2f} MB"
    if size >= 1024:  # KB
        return f"{size / 1024:.2f} KB"
    return f"{size} B"


def format_progress(size: int, size_left: int) -> str:
    """Percentage of a download already fetched"""
    if size <= 0:
        return "-"
    done = max(size - size_left, 0)
    return f"{done * 100 / size:.1f}%"
