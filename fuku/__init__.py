"""Event and command buses, log filtering, formatting helpers and a terminal log viewer model."""

__version__ = "0.1.0"