"""Recursive copying of files and directories that keeps permission bits."""

from __future__ import annotations

import os
import shutil
import stat
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def _debug(message: str) -> None:
    if os.environ.get("debug") in ("1", "true"):
        print(message)


def copy_files(src: PathLike, dest: PathLike) -> None:
    """Copy a file or a directory tree from ``src`` to ``dest``.

    Files keep the permission bits of their source; missing parent
    directories of the destination are created.
    """
    src_path = Path(src)
    info = src_path.stat()
    if stat.S_ISDIR(info.st_mode):
        _debug(f"Creating directory: {src_path.name} at {dest}")
        _copy_dir(src_path, Path(dest))
    else:
        _debug(f"cp - {src} {dest}")
        _copy_file(src_path, Path(dest))


def _copy_dir(src: Path, dest: Path) -> None:
    mode = stat.S_IMODE(src.stat().st_mode)
    dest.mkdir(mode=mode, parents=True, exist_ok=True)
    for entry in sorted(src.iterdir(), key=lambda p: p.name):
        copy_files(entry, dest / entry.name)


def _copy_file(src: Path, dest: Path) -> None:
    mode = stat.S_IMODE(src.stat().st_mode)
    _ensure_base_dir(dest)
    with open(src, "rb") as reader, open(dest, "wb") as writer:
        os.chmod(dest, mode)
        shutil.copyfileobj(reader, writer)


def _ensure_base_dir(path: Path) -> None:
    base = path.parent
    if base.is_dir():
        return
    base.mkdir(mode=0o755, parents=True, exist_ok=True)