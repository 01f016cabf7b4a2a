#!/usr/bin/env python3
"""
Batch Remover Module
Removes scale curves from a selection of animation clips through an
animation asset store and reports what was done.
"""

from typing import Iterable, List, Optional

from .batch_report import BatchReport, ClipResult
from .errors import SaveError, StoreError
from .property_classifier import is_scale_property

UNDO_GROUP_NAME = "Remove Scale Tracks"


class BatchScaleRemover:
    """Applies the scale-property classifier across a batch of clips

    For each clip, bindings are read from the store and classified first;
    matching curves are removed only after the scan of that clip is
    complete. One failing clip never aborts the batch: its error is recorded
    and processing continues with the next clip.
    """

    def __init__(self, store, progress_callback=None):
        """Initialize batch remover

        Args:
            store: AnimationAssetStore implementation that owns the clips
            progress_callback: Optional function to call for progress updates
                              Signature: callback(message: str) -> None
        """
        self.store = store
        self.progress_callback = progress_callback

    def log(self, message):
        """Send progress updates to callback"""
        if self.progress_callback:
            self.progress_callback(message)
        print(message)

    @staticmethod
    def unique_clips(clips: Iterable) -> List:
        """Drop None handles and repeated handles, keeping first-seen order"""
        unique = []
        seen = set()
        for clip in clips:
            if clip is None or clip in seen:
                continue
            seen.add(clip)
            unique.append(clip)
        return unique

    def clip_name(self, clip) -> str:
        """Display name of a clip, the handle itself if the store cannot tell"""
        try:
            return self.store.get_clip_name(clip)
        except StoreError:
            return str(clip)

    def find_scale_bindings(self, clip) -> List:
        """Scan both binding collections of a clip for scale channels

        Args:
            clip: Clip handle

        Returns:
            list: Scalar bindings to remove followed by object-reference bindings
        """
        marked = []
        for binding in self.store.get_curve_bindings(clip):
            if is_scale_property(binding.property_path):
                marked.append(binding)

        for binding in self.store.get_object_reference_curve_bindings(clip):
            if is_scale_property(binding.property_path):
                marked.append(binding)

        return marked

    def process_clip(self, clip) -> ClipResult:
        """Remove every scale curve from one clip

        Args:
            clip: Clip handle

        Returns:
            ClipResult: Removed property paths, or the store error
        """
        name = self.clip_name(clip)
        removed = []

        try:
            marked = self.find_scale_bindings(clip)

            for binding in marked:
                self.store.remove_curve(clip, binding)
                removed.append(binding.property_path)

        except StoreError as e:
            self.log(f"  ✗ {name}: {e}")
            return ClipResult(clip=clip, name=name, removed_paths=tuple(removed), error=str(e))

        if removed:
            self.log(f"  ✓ {name}: removed {len(removed)} scale curve(s)")
            for path in removed:
                self.log(f"      - {path}")
        else:
            self.log(f"  - {name}: no scale curves")

        return ClipResult(clip=clip, name=name, removed_paths=tuple(removed))

    def _persist(self, results: List[ClipResult]) -> List[ClipResult]:
        """Mark modified clips dirty and save them once

        Clips the store fails to save are turned into failed results.
        """
        modified = [result for result in results if result.modified]
        if not modified:
            return results

        for result in modified:
            self.store.mark_dirty(result.clip)

        try:
            self.store.save_all()
        except SaveError as e:
            self.log(f"ERROR: {e}")
            persisted = []
            for result in results:
                error = e.failed.get(result.clip)
                if error is not None:
                    result = ClipResult(clip=result.clip, name=result.name,
                                        removed_paths=result.removed_paths, error=error)
                persisted.append(result)
            return persisted

        return results

    def run(self, clips: Optional[Iterable]) -> BatchReport:
        """Remove scale curves from every clip in the selection

        Args:
            clips: Clip handles; None entries and duplicates are skipped

        Returns:
            BatchReport: Aggregate result of the run
        """
        selection = self.unique_clips(clips or [])
        if not selection:
            self.log("No animation clips to process.")
            return BatchReport()

        self.log(f"Processing {len(selection)} animation clip(s)...")

        results = []
        self.store.begin_undo_group(UNDO_GROUP_NAME)
        try:
            for index, clip in enumerate(selection, start=1):
                self.log(f"[{index}/{len(selection)}] {self.clip_name(clip)}")
                results.append(self.process_clip(clip))

            results = self._persist(results)
        finally:
            self.store.end_undo_group()

        report = BatchReport(clips=tuple(results))
        self.log(f"Done: {report.modified_clips}/{report.total_clips} clip(s) modified, "
                 f"{report.removed_binding_count} scale curve(s) removed.")
        return report
