from .json_exporters import write_points_json

__all__ = ["write_points_json"]
