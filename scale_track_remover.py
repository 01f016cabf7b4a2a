#!/usr/bin/env python3
"""
Scale Track Remover - Main Orchestrator Module
Coordinates clip selection, the asset store and the batch remover.

Used by both the command line (remove_scale.py) and the GUI
(remove_scale_gui.py) so they share one removal path and one set of
messages.
"""

import traceback

from core import BatchScaleRemover, BatchStatus, StoreError, format_confirm_message, format_report
from stores import collect_clips, create_store

VERSION = "1.2.0"


class ScaleTrackRemover:
    """Scale track removal (orchestrator/facade)

    This class coordinates one or more batches:
    1. Resolve the selection to .anim clips (files and folders)
    2. Remove scale curves via BatchScaleRemover over a shared store
    3. Summarize the BatchReport for the user

    The store lives as long as the facade, so the most recent batch can be
    undone with undo_last().
    """

    def __init__(self, backup=False, progress_callback=None, store=None):
        """Initialize remover

        Args:
            backup: Keep a .bak copy of each clip before it is first overwritten
            progress_callback: Optional function to call for progress updates
                              Signature: callback(message: str) -> None
            store: AnimationAssetStore to use (default: on-disk .anim store)
        """
        self.progress_callback = progress_callback
        self.store = store or create_store(backup=backup, progress_callback=progress_callback)

    def log(self, message):
        """Send progress updates to callback"""
        if self.progress_callback:
            self.progress_callback(message)
        print(message)

    def collect(self, paths):
        """Resolve selected files/folders to clip handles

        Args:
            paths: Selected .anim files and/or directories

        Returns:
            list: Clip handles, de-duplicated, in selection order
        """
        clips, skipped = collect_clips(paths)
        for entry in skipped:
            self.log(f"  Skipped (not an .anim file or folder with clips): {entry}")
        return clips

    def confirm_message(self, clips):
        """Confirmation prompt for the given clip handles"""
        remover = BatchScaleRemover(self.store)
        return format_confirm_message([remover.clip_name(clip) for clip in clips])

    def remove_scale_tracks(self, clips):
        """Remove scale curves from every clip

        Args:
            clips: Clip handles (see collect())

        Returns:
            dict: Results with keys:
                - 'success': bool (False only for unexpected errors)
                - 'status': BatchStatus
                - 'report': BatchReport (missing on unexpected errors)
                - 'message': Summary message
        """
        try:
            self.log(f"\n{'='*60}")
            self.log(f"Scale Track Remover v{VERSION}")
            self.log(f"{'='*60}")

            remover = BatchScaleRemover(self.store, progress_callback=self.progress_callback)
            report = remover.run(clips)

            message = format_report(report)
            self.log(f"\n{message}")
            self.log(f"{'='*60}\n")

            return {
                'success': True,
                'status': report.status,
                'report': report,
                'message': message,
            }

        except Exception as e:
            self.log(f"\nERROR: {str(e)}")
            self.log(traceback.format_exc())
            return {
                'success': False,
                'status': BatchStatus.NOTHING_TO_DO,
                'message': f"Removal failed: {str(e)}",
            }

    def run(self, paths):
        """Collect clips from paths and remove their scale curves

        Args:
            paths: Selected .anim files and/or directories

        Returns:
            dict: See remove_scale_tracks()
        """
        return self.remove_scale_tracks(self.collect(paths))

    @property
    def can_undo(self):
        return getattr(self.store, 'can_undo', False)

    def undo_last(self):
        """Revert the most recent batch on disk

        Returns:
            dict: Results with keys 'success', 'restored' (list) and 'message'
        """
        if not self.can_undo:
            return {'success': False, 'restored': [], 'message': "Nothing to undo."}

        try:
            restored = self.store.undo()
        except StoreError as e:
            self.log(f"ERROR: {e}")
            return {'success': False, 'restored': [], 'message': f"Undo failed: {e}"}

        message = f"Restored {len(restored)} animation clip(s)."
        self.log(message)
        return {'success': True, 'restored': restored, 'message': message}
