"""TPC data model, pad plane map, electron drift projection and event-generation helpers."""

__version__ = "0.1.0"