"""DealIQ - flip and rental deal analysis for investment properties."""

__version__ = "0.1.0"
