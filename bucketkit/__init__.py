"""Parts for object copy and sync tools: errors, logging, statistics, exclude filters, content types, sync strategies and command lines."""

__version__ = "0.1.0"