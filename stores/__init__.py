#!/usr/bin/env python3
"""
Stores Module
Animation asset stores and clip selection helpers.
"""

from pathlib import Path
from typing import Iterable, List, Tuple

from .base_store import AnimationAssetStore, PropertyBinding
from .anim_file_store import AnimFileStore, CurveTarget, BACKUP_SUFFIX

# Unity matches the extension case-sensitively
ANIM_EXTENSION = '.anim'
SUPPORTED_EXTENSIONS = {ANIM_EXTENSION}


def is_anim_file(path) -> bool:
    """Check if a path names an animation clip asset

    Args:
        path: File path

    Returns:
        bool: True if the file name ends with ".anim"
    """
    return str(path).endswith(ANIM_EXTENSION)


def collect_clips(paths: Iterable) -> Tuple[List[Path], List[str]]:
    """Resolve a user selection to animation clip handles

    Files are taken as-is when they end with ".anim"; directories are
    searched recursively. Each clip appears once, in selection order.

    Args:
        paths: Selected files and/or directories

    Returns:
        tuple: (clips, skipped) where clips are resolved .anim paths and
               skipped lists the selection entries that were ignored
    """
    clips = []
    seen = set()
    skipped = []

    def add(clip_path: Path):
        resolved = clip_path.resolve()
        if resolved not in seen:
            seen.add(resolved)
            clips.append(resolved)

    for entry in paths:
        if not entry:
            continue

        path = Path(entry)
        if path.is_dir():
            found = sorted(p for p in path.rglob('*' + ANIM_EXTENSION)
                           if p.is_file() and is_anim_file(p))
            if not found:
                skipped.append(str(entry))
            for clip_path in found:
                add(clip_path)
        elif path.is_file() and is_anim_file(path):
            add(path)
        else:
            skipped.append(str(entry))

    return clips, skipped


def create_store(backup=False, progress_callback=None) -> AnimationAssetStore:
    """Factory function for the default on-disk store

    Args:
        backup: Keep a .bak copy of every file before it is first overwritten
        progress_callback: Optional function to call for progress updates

    Returns:
        AnimationAssetStore: AnimFileStore instance
    """
    return AnimFileStore(backup=backup, progress_callback=progress_callback)


__all__ = [
    'AnimationAssetStore',
    'PropertyBinding',
    'AnimFileStore',
    'CurveTarget',
    'BACKUP_SUFFIX',
    'ANIM_EXTENSION',
    'SUPPORTED_EXTENSIONS',
    'is_anim_file',
    'collect_clips',
    'create_store',
]
