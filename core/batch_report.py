#!/usr/bin/env python3
"""
Batch Report Module
Result data structures for one batch scale-removal run.

The batch remover accumulates one ClipResult per processed clip and
freezes them into a BatchReport when the run is over.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple


class BatchStatus(Enum):
    """Aggregate outcome of a run"""
    NOTHING_TO_DO = "nothing_to_do"   # no clip was modified (includes empty selection)
    PARTIAL = "partial"               # some, but not all, clips were modified
    SUCCESS = "success"               # every clip was modified


@dataclass(frozen=True)
class ClipResult:
    """Outcome for a single clip

    Attributes:
        clip: Clip handle as passed to the run
        name: Display name of the clip
        removed_paths: Property paths of the curves removed from the clip
        error: Store failure message, None if the clip was processed cleanly
    """
    clip: Any
    name: str
    removed_paths: Tuple[str, ...] = ()
    error: Optional[str] = None

    @property
    def modified(self) -> bool:
        return self.error is None and len(self.removed_paths) > 0

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class BatchReport:
    """Aggregate result of one run

    Attributes:
        clips: Per-clip results in processing order (duplicates and None
               handles already dropped)
    """
    clips: Tuple[ClipResult, ...] = field(default_factory=tuple)

    @property
    def total_clips(self) -> int:
        return len(self.clips)

    @property
    def modified_clips(self) -> int:
        return sum(1 for result in self.clips if result.modified)

    @property
    def removed_binding_count(self) -> int:
        return sum(len(result.removed_paths) for result in self.clips if result.modified)

    @property
    def failures(self) -> List[ClipResult]:
        return [result for result in self.clips if result.failed]

    @property
    def status(self) -> BatchStatus:
        modified = self.modified_clips
        if modified == 0:
            return BatchStatus.NOTHING_TO_DO
        if modified < self.total_clips:
            return BatchStatus.PARTIAL
        return BatchStatus.SUCCESS

    def get_result(self, clip) -> Optional[ClipResult]:
        """Find the result for a clip handle

        Args:
            clip: Clip handle to look up

        Returns:
            ClipResult if the clip was processed, None otherwise
        """
        for result in self.clips:
            if result.clip == clip:
                return result
        return None
