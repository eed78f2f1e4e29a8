from dataclasses import dataclass


@dataclass
class TreeStats:
    directories: int = 0
    files: int = 0


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def format_stats(stats: TreeStats) -> str:
    """Build the summary line, e.g. ``3 directories, 1 file``."""
    return ", ".join(
        [
            _plural(stats.directories, "directory", "directories"),
            _plural(stats.files, "file", "files"),
        ]
    )
