"""Course catalog and enrollment API."""

__version__ = "1.0.0"
