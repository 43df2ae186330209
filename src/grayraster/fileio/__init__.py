"""Image file formats."""

from grayraster.fileio.pgm import load_pgm, save_pgm

__all__ = ["load_pgm", "save_pgm"]
