"""
prc_keygen.utils
----------------
Small helpers for timestamps and path handling shared by the writers and
the naming layer.
"""

from __future__ import annotations
import os, time


def now_epoch() -> int:
    # Seconds since the epoch, the unit stored in the key tables
    return int(time.time())


def split_extension(path: str):
    """Split 'dir/name.ext' into ('dir/name', 'ext'); ext has no dot."""
    root, ext = os.path.splitext(path)
    return root, ext[1:] if ext else ""


def basename_wo_extension(path: str) -> str:
    return os.path.splitext(os.path.basename(path))[0]
