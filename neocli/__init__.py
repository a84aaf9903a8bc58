"""neocli - node configuration resolution and process-wide settings."""

__version__ = "2.10.3"
