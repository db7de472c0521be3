"""Value-object schema synthesizer."""

__version__ = "0.1.0"
