"""Convert sprite images into packed monochrome byte tables for firmware."""

__version__ = "0.1.0"
