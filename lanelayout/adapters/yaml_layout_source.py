"""
Layout source backed by a YAML layout file.
"""

from pathlib import Path
from typing import List, Optional, Tuple

from ..config import AppConfig
from ..domain.exceptions import LayoutFileError
from ..domain.pin_fall_type import PinFallType


class YamlLayoutSource:
    """
    Supplies lane range triples per center from a loaded ``AppConfig``.

    Only type-level validation happens here (via Pydantic); the triples are
    handed to the domain unchanged.
    """

    def __init__(self, config: AppConfig):
        self.config = config

    @classmethod
    def from_path(cls, config_path: Path) -> "YamlLayoutSource":
        """
        Load a layout file.

        Raises:
            LayoutFileError: If the file is missing, not valid YAML, or does
                not match the expected structure
        """
        try:
            config = AppConfig.load_from_yaml(config_path)
        except (OSError, ValueError) as exc:
            raise LayoutFileError(str(exc)) from exc
        return cls(config)

    def center_names(self) -> List[str]:
        """Return center names in file order."""
        return [center.name for center in self.config.centers]

    def get_ranges(self, center_name: str) -> List[Tuple[int, int, Optional[PinFallType]]]:
        """
        Return (start_lane, end_lane, pin_fall_type) triples for a center.

        Raises:
            LayoutFileError: If the center is not in the file
        """
        center = self.config.find_center(center_name)
        if center is None:
            known = ", ".join(self.center_names()) or "none"
            raise LayoutFileError(
                f"Unknown center: '{center_name}'. Centers in file: {known}"
            )

        return [entry.as_triple() for entry in self.config.resolved_entries(center)]
