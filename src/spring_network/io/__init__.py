from .trajectory import TRAJECTORY_COLUMNS, TrajectoryWriter, read_trajectory

__all__ = [
    "TRAJECTORY_COLUMNS",
    "TrajectoryWriter",
    "read_trajectory",
]
