"""
Per-sender output files.

Decoded records are routed to one file per MMSI. The first write to
a sender's file during a run replaces any previous contents; later
writes append.
"""

import logging
from pathlib import Path
from typing import List, Set, Union

logger = logging.getLogger(__name__)


class MmsiFileRouter:
    """
    Routes record text to <output_dir>/<mmsi><extension>.
    """

    def __init__(
        self,
        output_dir: Union[str, Path],
        extension: str = ".txt",
        encoding: str = "utf-8",
    ):
        """
        Initialize router.

        Args:
            output_dir: Directory receiving the per-sender files
            extension: File name suffix
            encoding: Text encoding of the output files
        """
        self._output_dir = Path(output_dir).expanduser()
        self._extension = extension
        self._encoding = encoding
        self._written: Set[str] = set()
        self._order: List[str] = []

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    @property
    def written_mmsis(self) -> List[str]:
        """Senders written during this run, in first-write order."""
        return list(self._order)

    def path_for(self, mmsi: str) -> Path:
        """Get the output file path for a sender."""
        return self._output_dir / f"{mmsi}{self._extension}"

    def write(self, mmsi: str, content: str) -> bool:
        """
        Write record text to a sender's file.

        Args:
            mmsi: Sender MMSI as text
            content: Text to write

        Returns:
            True if written successfully, False otherwise
        """
        first_write = mmsi not in self._written
        mode = "w" if first_write else "a"
        path = self.path_for(mmsi)

        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            with open(path, mode, encoding=self._encoding) as f:
                f.write(content)
        except OSError as e:
            logger.warning(f"Could not write to {path}: {e}")
            return False

        if first_write:
            self._written.add(mmsi)
            self._order.append(mmsi)
            logger.debug(f"Created output file {path}")
        return True
