import os
import time
import logging
from pathlib import Path
from typing import Union


def create_path(apath: Path):
    os.makedirs(apath, exist_ok=True)


package_dir = Path(__file__).resolve().parent
brightstars_dir = package_dir.parent.parent
astro_data_dir = brightstars_dir / "astro_data"
data_dir = Path(Path.home(), "BrightStars_data")


def astro_data_path(apath: Union[str, Path]) -> Path:
    """Relative catalog paths are looked up in astro_data"""
    apath = Path(apath).expanduser()
    if apath.is_absolute():
        return apath
    return astro_data_dir / apath


class Timer:
    """
    Time multiple code blocks using a context manager.
    Usage:
        with Timer("read bsc5"):
            stars = read_bsc5_stars(path)
    """

    def __init__(self, name):
        self.name = name
        self.start_time = None
        self.logger = logging.getLogger("BrightStars.Timer")

    def __enter__(self):
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        end_time = time.time()
        elapsed_time = end_time - self.start_time
        self.logger.debug("%s: %.6f seconds", self.name, elapsed_time)
