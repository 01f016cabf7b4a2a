#!/usr/bin/env python3
"""
Base Store Module
Abstract interface for animation asset stores.

A store owns clip assets and their curve data. The batch remover only ever
asks a store for bindings, asks it to remove curves, and calls its
persistence and undo hooks, so any host (a Unity project on disk, an
in-memory fixture, ...) can be plugged in by implementing this class.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List


@dataclass(frozen=True)
class PropertyBinding:
    """One animated property on one clip

    Attributes:
        property_path: Dot-separated property path (e.g. "m_LocalScale.x")
        target: Target object reference, owned by the store
        curve: Curve payload, owned by the store and only passed back to it
    """
    property_path: str
    target: Any = None
    curve: Any = field(default=None, compare=False, repr=False)


class AnimationAssetStore(ABC):
    """Abstract base class for animation asset stores

    Clip handles are opaque to callers: they are only ever passed back to
    the store that produced or accepted them.
    """

    def __init__(self, progress_callback=None):
        """Initialize store

        Args:
            progress_callback: Optional function to call for progress updates
                              Signature: callback(message: str) -> None
        """
        self.progress_callback = progress_callback

    def log(self, message):
        """Send progress/status message"""
        if self.progress_callback:
            self.progress_callback(message)
        print(message)

    @abstractmethod
    def get_curve_bindings(self, clip) -> List[PropertyBinding]:
        """Get the scalar curve bindings of a clip

        Raises:
            StoreError: If the clip cannot be read
        """
        pass

    @abstractmethod
    def get_object_reference_curve_bindings(self, clip) -> List[PropertyBinding]:
        """Get the object-reference curve bindings of a clip

        Raises:
            StoreError: If the clip cannot be read
        """
        pass

    @abstractmethod
    def remove_curve(self, clip, binding: PropertyBinding):
        """Delete the curve named by binding from the clip

        Idempotent: removing a curve that is already gone does nothing.

        Raises:
            StoreError: If the clip cannot be modified
        """
        pass

    @abstractmethod
    def mark_dirty(self, clip):
        """Flag a clip as modified so save_all() persists it"""
        pass

    @abstractmethod
    def save_all(self):
        """Persist every dirty clip

        Raises:
            SaveError: Listing the clips that could not be saved
        """
        pass

    @abstractmethod
    def begin_undo_group(self, name: str):
        """Open a transactional group so a whole batch undoes in one step"""
        pass

    @abstractmethod
    def end_undo_group(self):
        """Close the group opened by begin_undo_group()"""
        pass

    def get_clip_name(self, clip) -> str:
        """Return a human-readable clip name (display only)"""
        return str(clip)
