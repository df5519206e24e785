"""Audio buffers, frequency bins, windowing, DFT analysis and numeric helpers."""

__version__ = "0.1.0"