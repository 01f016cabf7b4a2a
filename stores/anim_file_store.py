#!/usr/bin/env python3
"""
Anim File Store Module
Animation asset store over text-serialized Unity .anim files on disk.

Replaces the Unity editor services the removal needs: curve bindings come
from the clip's YAML curve lists, dirty clips are written back by
save_all(), and undo groups keep the original file text so a whole batch
can be reverted in one step.
"""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from core.errors import ClipLoadError, SaveError, StoreError
from .anim_clip_document import (
    AnimClipDocument,
    CurveEntry,
    PPTR_CURVE_SECTIONS,
    SCALAR_CURVE_SECTIONS,
)
from .base_store import AnimationAssetStore, PropertyBinding

BACKUP_SUFFIX = '.bak'


@dataclass(frozen=True)
class CurveTarget:
    """Animated object a binding points at

    Attributes:
        path: Transform path relative to the animated root ("" for root)
        class_id: Unity class id of the animated component (4 = Transform)
    """
    path: str
    class_id: int


class AnimFileStore(AnimationAssetStore):
    """Store for Unity AnimationClip assets saved with text serialization

    Clip handles are paths to .anim files. Documents are loaded lazily and
    cached for the lifetime of the store.
    """

    def __init__(self, backup: bool = False, progress_callback=None):
        """Initialize store

        Args:
            backup: Copy each file to <file>.bak before it is first overwritten
            progress_callback: Optional function to call for progress updates
        """
        super().__init__(progress_callback)
        self.backup = backup
        self._documents: Dict[Path, AnimClipDocument] = {}
        self._saved_text: Dict[Path, str] = {}
        # (mtime_ns, size) of each file as last read or written
        self._stamps: Dict[Path, Optional[Tuple[int, int]]] = {}
        # Dirty clips keyed by path, valued by the handle the caller used
        self._dirty: Dict[Path, Any] = {}
        self._backed_up = set()

        self._undo_depth = 0
        self._undo_name: Optional[str] = None
        self._undo_snapshot: Dict[Path, str] = {}
        self._undo_stack: List[Tuple[str, Dict[Path, str]]] = []

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @staticmethod
    def _key(clip) -> Path:
        return Path(clip)

    @staticmethod
    def _stamp(key: Path) -> Optional[Tuple[int, int]]:
        try:
            stat = key.stat()
        except OSError:
            return None
        return stat.st_mtime_ns, stat.st_size

    def _forget(self, key: Path):
        self._documents.pop(key, None)
        self._saved_text.pop(key, None)
        self._stamps.pop(key, None)

    def load(self, clip) -> AnimClipDocument:
        """Load (or return the cached) document for a clip

        A cached document without unsaved edits is re-read when the file
        changed on disk since it was loaded.

        Raises:
            ClipLoadError: If the file is unreadable, binary or not a clip
        """
        key = self._key(clip)
        document = self._documents.get(key)
        if document is not None:
            if (document.text() != self._saved_text[key] or
                    self._stamps.get(key) == self._stamp(key)):
                return document
            self.log(f"  {key.name} changed on disk, reloading")
            self._forget(key)

        try:
            with open(key, 'r', encoding='utf-8', newline='') as f:
                text = f.read()
        except UnicodeDecodeError:
            raise ClipLoadError(f"{key.name} is not a text-serialized asset "
                                "(set Asset Serialization to Force Text)")
        except OSError as e:
            raise ClipLoadError(f"Cannot read {key}: {e.strerror or e}")

        try:
            document = AnimClipDocument.parse(text)
        except ValueError as e:
            raise ClipLoadError(f"{key.name}: {e}")

        self._documents[key] = document
        self._saved_text[key] = text
        self._stamps[key] = self._stamp(key)
        return document

    def get_clip_name(self, clip) -> str:
        return self._key(clip).stem

    # ------------------------------------------------------------------
    # Bindings
    # ------------------------------------------------------------------

    @staticmethod
    def _binding(entry: CurveEntry) -> PropertyBinding:
        return PropertyBinding(property_path=entry.property_path,
                               target=CurveTarget(entry.path, entry.class_id),
                               curve=entry)

    def get_curve_bindings(self, clip) -> List[PropertyBinding]:
        document = self.load(clip)
        return [self._binding(entry) for entry in document.curve_entries(SCALAR_CURVE_SECTIONS)]

    def get_object_reference_curve_bindings(self, clip) -> List[PropertyBinding]:
        document = self.load(clip)
        return [self._binding(entry) for entry in document.curve_entries(PPTR_CURVE_SECTIONS)]

    def remove_curve(self, clip, binding: PropertyBinding):
        if not isinstance(binding.curve, CurveEntry):
            raise StoreError(f"Binding {binding.property_path} was not produced by this store")

        key = self._key(clip)
        document = self.load(key)

        if self._undo_depth and key not in self._undo_snapshot:
            self._undo_snapshot[key] = self._saved_text[key]

        document.remove_entry(binding.curve)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def mark_dirty(self, clip):
        key = self._key(clip)
        if key not in self._dirty:
            self._dirty[key] = clip

    @property
    def dirty_clips(self) -> List[Path]:
        return list(self._dirty)

    def _write(self, key: Path, text: str):
        with open(key, 'w', encoding='utf-8', newline='') as f:
            f.write(text)

    def save_all(self):
        failed = {}
        for key, clip in self._dirty.items():
            document = self._documents.get(key)
            if document is None:
                continue

            text = document.text()
            if text == self._saved_text.get(key):
                continue

            try:
                if self.backup and key not in self._backed_up:
                    shutil.copy2(key, key.with_name(key.name + BACKUP_SUFFIX))
                    self._backed_up.add(key)
                self._write(key, text)
            except OSError as e:
                failed[clip] = f"Cannot write {key.name}: {e.strerror or e}"
                # Keep the cache in line with what is on disk
                self._forget(key)
                continue

            self._saved_text[key] = text
            self._stamps[key] = self._stamp(key)
            self.log(f"  Saved {key.name}")

        self._dirty = {}

        if failed:
            raise SaveError(failed)

    # ------------------------------------------------------------------
    # Undo
    # ------------------------------------------------------------------

    def begin_undo_group(self, name: str):
        if self._undo_depth == 0:
            self._undo_name = name
            self._undo_snapshot = {}
        self._undo_depth += 1

    def end_undo_group(self):
        if self._undo_depth == 0:
            return

        self._undo_depth -= 1
        if self._undo_depth == 0 and self._undo_snapshot:
            self._undo_stack.append((self._undo_name, self._undo_snapshot))
            self._undo_snapshot = {}

    @property
    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    @property
    def undo_name(self) -> Optional[str]:
        return self._undo_stack[-1][0] if self._undo_stack else None

    def undo(self) -> List[Path]:
        """Restore every clip of the most recent undo group on disk

        Returns:
            list: Restored clip paths (empty if there is nothing to undo)

        Raises:
            SaveError: If some clips could not be restored
        """
        if not self._undo_stack:
            return []

        name, snapshot = self._undo_stack.pop()
        self.log(f"Undo: {name}")

        restored = []
        failed = {}
        for key, text in snapshot.items():
            try:
                self._write(key, text)
            except OSError as e:
                failed[key] = f"Cannot restore {key.name}: {e.strerror or e}"
                continue

            self._forget(key)
            restored.append(key)
            self.log(f"  Restored {key.name}")

        if failed:
            raise SaveError(failed)

        return restored
