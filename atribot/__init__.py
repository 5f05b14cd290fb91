"""Chat bot configuration, command line and standalone chat features."""

__version__ = "0.1.0"