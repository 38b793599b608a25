"""PTZ - focus areas with traffic-light priorities and WIP limits."""

__version__ = "0.1.0"
