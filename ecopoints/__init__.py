"""EcoPoints: local eco-actions tracker data layer."""

__version__ = "1.0.0"
