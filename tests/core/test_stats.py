import pytest

from fstree.core.stats import TreeStats, format_stats


@pytest.mark.parametrize(
    "directories, files, expected",
    [
        (0, 0, "0 directories, 0 files"),
        (1, 1, "1 directory, 1 file"),
        (1, 2, "1 directory, 2 files"),
        (3, 1, "3 directories, 1 file"),
        (12, 40, "12 directories, 40 files"),
    ],
)
def test_format_stats(directories, files, expected):
    assert format_stats(TreeStats(directories=directories, files=files)) == expected


def test_stats_defaults():
    stats = TreeStats()

    assert stats.directories == 0
    assert stats.files == 0
