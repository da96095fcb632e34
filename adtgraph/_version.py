"""Version information for adtgraph."""

__version__ = "0.1.0"
