#!/usr/bin/env python3
"""
Messages Module
User-facing confirmation and result strings shared by the CLI and GUI.
"""

from typing import Sequence

from .batch_report import BatchReport, BatchStatus

PARTIAL_SUCCESS_TITLE = "Partial Success"
PARTIAL_SUCCESS_NOTE = "Some clips may not have had scale tracks to remove."
NO_SELECTION_MESSAGE = "No animation clips selected."


def _clips_word(count: int) -> str:
    return "animation clip" if count == 1 else "animation clips"


def format_confirm_message(clip_names: Sequence[str]) -> str:
    """Build the confirmation prompt shown before a run

    Args:
        clip_names: Display names of the selected clips

    Returns:
        str: Prompt text
    """
    if len(clip_names) == 1:
        return f"Remove scale tracks from '{clip_names[0]}'?"
    return f"Remove scale tracks from {len(clip_names)} animation clips?"


def format_result_message(modified_count: int, total_count: int) -> str:
    """Build the one-line result summary

    Args:
        modified_count: Clips that had scale tracks removed
        total_count: Clips processed

    Returns:
        str: Summary text
    """
    if modified_count == total_count:
        return (f"Successfully removed scale tracks from {modified_count} "
                f"{_clips_word(modified_count)}.")

    return (f"Removed scale tracks from {modified_count} out of {total_count} "
            f"{_clips_word(total_count)}.")


def format_report(report: BatchReport) -> str:
    """Render a full, multi-line summary of a batch report

    Args:
        report: Report returned by BatchScaleRemover.run()

    Returns:
        str: Summary text
    """
    if report.total_clips == 0:
        return NO_SELECTION_MESSAGE

    lines = [format_result_message(report.modified_clips, report.total_clips)]
    lines.append(f"Removed {report.removed_binding_count} scale curve(s).")

    if report.status != BatchStatus.SUCCESS:
        lines.append("")
        lines.append(PARTIAL_SUCCESS_NOTE)

    failures = report.failures
    if failures:
        lines.append("")
        lines.append(f"Failed clips ({len(failures)}):")
        for result in failures:
            lines.append(f"  - {result.name}: {result.error}")

    return "\n".join(lines)
