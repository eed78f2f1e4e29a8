from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from fstree.utils.error_handling import ValidationError


def _unlimited(value: Optional[int]) -> Optional[int]:
    # Negative limits mean "no limit", like the -1 default of the flags.
    if value is None or value < 0:
        return None
    return value


@dataclass(frozen=True)
class WalkOptions:
    """Filter toggles applied while walking a directory tree."""

    all_files: bool = False
    dirs_only: bool = False
    full_path: bool = False
    file_limit: Optional[int] = None
    max_depth: Optional[int] = None
    permissions: bool = False

    def __post_init__(self):
        object.__setattr__(self, "file_limit", _unlimited(self.file_limit))
        object.__setattr__(self, "max_depth", _unlimited(self.max_depth))

        if self.max_depth == 0:
            raise ValidationError(
                "Invalid level, must be greater than 0.", max_depth=self.max_depth
            )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
