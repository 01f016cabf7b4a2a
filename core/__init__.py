#!/usr/bin/env python3
"""
Core Module
Scale-property classification and batch removal, independent of any host.
"""

from .property_classifier import is_scale_property
from .batch_report import BatchReport, BatchStatus, ClipResult
from .batch_remover import BatchScaleRemover, UNDO_GROUP_NAME
from .errors import StoreError, ClipLoadError, SaveError
from .messages import (
    format_confirm_message,
    format_result_message,
    format_report,
    PARTIAL_SUCCESS_TITLE,
)

__all__ = [
    'is_scale_property',
    'BatchReport',
    'BatchStatus',
    'ClipResult',
    'BatchScaleRemover',
    'UNDO_GROUP_NAME',
    'StoreError',
    'ClipLoadError',
    'SaveError',
    'format_confirm_message',
    'format_result_message',
    'format_report',
    'PARTIAL_SUCCESS_TITLE',
]
