"""
files.py

Responsibility: Classify and enumerate files in a scaffolded project tree.

Rules:
- Walk files in sorted order so every rewrite pass is deterministic.
- Binary detection inspects raw bytes only; nothing is decoded here.

This module intentionally does NOT know about templates, placeholders, or git.
"""

from __future__ import annotations

import os
from pathlib import Path

BINARY_SAMPLE_SIZE = 8000


def is_binary(buffer: bytes) -> bool:
    """
    Best-effort: treat a buffer as binary if a null byte occurs in the first
    `BINARY_SAMPLE_SIZE` bytes.
    """
    return b"\x00" in buffer[:BINARY_SAMPLE_SIZE]


def list_files(root: str | Path) -> list[str]:
    """
    Return all regular files under root as root-relative POSIX paths, in
    deterministic lexicographic order. Directories and symlinks are not part
    of the output, so rewrites never write outside root.
    """
    root_path = Path(root)
    files: list[str] = []
    for dirpath, _dirs, filenames in os.walk(root_path):
        base = Path(dirpath)
        for name in filenames:
            path = base / name
            if path.is_symlink() or not path.is_file():
                continue
            files.append(path.relative_to(root_path).as_posix())
    files.sort()
    return files


def read_text_file(path: Path) -> str | None:
    """
    Return the UTF-8 contents of a text file, or None for binary/undecodable files.
    """
    buffer = path.read_bytes()
    if is_binary(buffer):
        return None
    try:
        return buffer.decode("utf-8")
    except UnicodeDecodeError:
        return None


def write_text_file(path: Path, content: str) -> None:
    # Keep line endings exactly as read.
    path.write_text(content, encoding="utf-8", newline="")
