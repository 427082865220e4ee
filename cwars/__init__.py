"""A small real-time strategy prototype with a scrolling camera and box selection of units."""

__version__ = "0.1.0"