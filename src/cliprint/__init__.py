"""cliprint: identify which CLI client sent an API request."""

__version__ = "0.1.0"
