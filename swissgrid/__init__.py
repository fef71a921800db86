"""Conversion between Swiss grid coordinates (LV03, LV95) and WGS84, with a round-trip error map."""

__version__ = "0.2.0"
__all__ = ["coordinates", "errormap"]