"""
Record list → JSON output.
"""

from .json_writer import records_to_json, write_records

__all__ = ["records_to_json", "write_records"]
