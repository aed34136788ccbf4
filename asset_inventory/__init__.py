"""Asset inventory backend: a REST service over the assets table."""

__version__ = "0.1.0"
