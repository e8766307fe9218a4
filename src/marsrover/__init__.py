"""marsrover — toroidal-grid rover mission simulator."""

__version__ = "0.1.0"
