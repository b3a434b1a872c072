"""Configuration for the LIMS spreadsheet export."""

from .settings import BACKENDS, Config

__all__ = ["BACKENDS", "Config"]
