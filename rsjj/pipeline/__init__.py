"""Scan entrypoints and result carrier."""

from rsjj.pipeline.entrypoints import scan_file, scan_text
from rsjj.pipeline.result import ScanResult

__all__ = [
    "ScanResult",
    "scan_file",
    "scan_text",
]
