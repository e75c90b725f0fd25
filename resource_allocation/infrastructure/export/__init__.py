from .exporters import export_csv, export_json

__all__ = ["export_csv", "export_json"]
