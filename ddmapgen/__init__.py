"""Waypoint-driven random map generation for DDNet-style race maps, with econ helpers."""

__version__ = "0.1.0"