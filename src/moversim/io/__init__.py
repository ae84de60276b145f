"""
File output.

- write_snapshot / save_snapshot: tab-separated dump of every body
"""

from moversim.io.snapshot import write_snapshot, save_snapshot, header_columns

__all__ = [
    "write_snapshot",
    "save_snapshot",
    "header_columns",
]
