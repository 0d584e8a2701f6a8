"""Tram line simulation: shared stops, tram models and randomly delayed routes."""

__version__ = "0.1.0"

__all__ = ["models", "stop", "tram"]