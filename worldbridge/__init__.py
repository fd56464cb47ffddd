"""worldbridge - declarative build and world-control tools for a remote block world."""

__version__ = "1.0.0"
