"""Spreadsheet cleaning, validation and rule configuration for resource allocation."""

__version__ = "1.0.0"
