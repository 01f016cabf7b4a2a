#!/usr/bin/env python3
"""
Errors Module
Failures surfaced by animation asset stores.

The batch remover treats every StoreError as a per-clip failure: it is
recorded on the clip's result and the batch continues with the next clip.
"""

from typing import Any, Dict


class StoreError(Exception):
    """Base class for asset store read/write failures"""
    pass


class ClipLoadError(StoreError):
    """Clip could not be read or is not a text-serialized AnimationClip"""
    pass


class SaveError(StoreError):
    """One or more dirty clips could not be written back

    Attributes:
        failed: Mapping of clip handle -> error message for every clip that
                was not saved. Clips not listed were saved successfully.
    """

    def __init__(self, failed: Dict[Any, str]):
        self.failed = dict(failed)
        super().__init__(
            f"Failed to save {len(self.failed)} clip(s): " +
            "; ".join(f"{clip}: {error}" for clip, error in self.failed.items())
        )
