"""appforge -- converts classic projects into app projects."""

__version__ = "0.1.0"
