from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import TextIO

import numpy as np

from ..core.model import Mass

_LOG = logging.getLogger(__name__)

TRAJECTORY_COLUMNS = ("pos_x", "pos_y", "vel_x", "vel_y")


class TrajectoryWriter:
    """Append one ``posX posY velX velY`` record per step to a text file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.records = 0
        self._handle: TextIO | None = None

    def __enter__(self) -> "TrajectoryWriter":
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = self.path.open("w", encoding="utf-8")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def write(self, mass: Mass) -> None:
        if self._handle is None:
            raise RuntimeError("TrajectoryWriter is not open")
        self._handle.write(mass.format_state())
        self.records += 1

    def close(self) -> None:
        if self._handle is None:
            return
        self._handle.close()
        self._handle = None
        _LOG.debug("Wrote %d trajectory records to %s", self.records, self.path)


def read_trajectory(path: str | Path) -> np.ndarray:
    data = np.loadtxt(Path(path), dtype=float, ndmin=2)
    if data.size == 0:
        return np.zeros((0, len(TRAJECTORY_COLUMNS)), dtype=float)
    if data.shape[1] != len(TRAJECTORY_COLUMNS):
        raise ValueError(f"Trajectory rows must have {len(TRAJECTORY_COLUMNS)} columns, got {data.shape[1]}")
    return data
