from .spreadsheet_reader import read_spreadsheet

__all__ = ["read_spreadsheet"]
