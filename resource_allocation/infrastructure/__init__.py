"""Adapters for spreadsheet ingestion and dataset export."""
