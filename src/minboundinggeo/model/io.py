"""
Input/Output Manager
Reads point sets from CSV / NumPy files and writes hulls back out.
"""
import logging
import os
from typing import Iterable

import numpy as np

from minboundinggeo.model.geometry_primitives import Point

# Get module logger
logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = (".csv", ".txt")
NUMPY_EXTENSION = ".npy"


class PointIO:
    @staticmethod
    def points_from_array(array: np.ndarray) -> list[Point]:
        """
        Convert an (n, 2) or (n, 3) coordinate array into points.

        Raises:
            ValueError: If the array has a different shape.
        """
        array = np.asarray(array, dtype=np.float64)
        if array.size == 0:
            return []
        if array.ndim == 1:
            # A single row read from a one-line file
            array = array.reshape(1, -1)
        if array.ndim != 2 or array.shape[1] not in (2, 3):
            msg = f"Expected coordinates of shape (n, 2) or (n, 3), got {array.shape}."
            logger.error(msg)
            raise ValueError(msg)
        return [Point.from_sequence(row) for row in array]

    @staticmethod
    def load_points(filepath: str) -> list[Point]:
        """
        Load points from a `.csv`/`.txt` file (comma separated, optional header
        line, `#` comments) or from a `.npy` file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the extension is unknown or the data is malformed.
        """
        logger.info(f"Loading points from: {filepath}")
        if not os.path.exists(filepath):
            msg = f"File not found: {filepath}"
            logger.error(msg)
            raise FileNotFoundError(msg)

        ext = os.path.splitext(filepath)[1].lower()
        try:
            if ext == NUMPY_EXTENSION:
                data = np.load(filepath, allow_pickle=False)
            elif ext in TEXT_EXTENSIONS:
                data = PointIO._load_text(filepath)
            else:
                raise ValueError(f"Unsupported point file extension '{ext}'.")
        except ValueError as e:
            logger.error(f"Failed to load points from '{filepath}': {e}")
            raise

        points = PointIO.points_from_array(data)
        logger.debug(f"Loaded {len(points)} points.")
        return points

    @staticmethod
    def _load_text(filepath: str) -> np.ndarray:
        with open(filepath, "r", encoding="utf-8") as f:
            lines = [line for line in f if line.strip() and not line.lstrip().startswith("#")]
        if not lines:
            return np.empty((0, 3))

        # Skip a header line such as "x,y,z"
        skip = 0
        try:
            [float(v) for v in lines[0].split(",")]
        except ValueError:
            skip = 1
        if len(lines) == skip:
            return np.empty((0, 3))
        return np.loadtxt(lines[skip:], delimiter=",", ndmin=2)

    @staticmethod
    def save_points(points: Iterable[Point], filepath: str) -> None:
        """Write points as `x,y,z` rows (`.csv`/`.txt`) or as a `.npy` array."""
        data = np.array([p.to_array() for p in points], dtype=np.float64).reshape(-1, 3)
        ext = os.path.splitext(filepath)[1].lower()
        logger.info(f"Saving {len(data)} points to: {filepath}")
        if ext == NUMPY_EXTENSION:
            np.save(filepath, data)
        elif ext in TEXT_EXTENSIONS:
            np.savetxt(filepath, data, delimiter=",", header="x,y,z", comments="", fmt="%.17g")
        else:
            msg = f"Unsupported point file extension '{ext}'."
            logger.error(msg)
            raise ValueError(msg)
