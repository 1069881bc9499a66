"""Static HTML dashboards for the local DNS cache and host metrics."""

__version__ = "0.1.0"
