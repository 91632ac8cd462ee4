"""diskinfo - disk usage snapshot for the local host."""

__version__ = "0.1.0"
