"""
Configuration & Constants
=========================
This module serves as the central registry for numeric tolerances, file paths
and other global constants.

Why is this file needed?
------------------------
1. Consistency: Every zero/equality test on a derived floating value (cross
   products, dot products, coincident points) must use the same tolerance.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find the bundled sample point sets when the tool is frozen into an .exe.

Exports:
    RELATIVE_TOLERANCE (float): Relative error under which two reals are equal.
    ABSOLUTE_TOLERANCE (float): Magnitude under which values count as zero.
    ASSETS_PATH (str): Absolute path to the assets directory.
    SAMPLE_POINTS_PATH (str): Absolute path to the default sample point set.
    LOG_LEVEL_ENV (str): Environment variable read by the CLI for the log level.
"""
import math
import sys
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/minboundinggeo/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Numeric tolerances
RELATIVE_TOLERANCE: float = 1e-10
# Four times the smallest positive (subnormal) double.
ABSOLUTE_TOLERANCE: float = 4 * math.ulp(0.0)

# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
SAMPLE_POINTS_PATH: str = os.path.join(ASSETS_PATH, "quad_points.csv")
LOG_LEVEL_ENV: str = "MINBOUNDINGGEO_LOG_LEVEL"
