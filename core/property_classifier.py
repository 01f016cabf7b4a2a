#!/usr/bin/env python3
"""
Property Classifier Module
Decides from a property path alone whether it addresses a scale channel.

Property paths follow the Unity curve binding convention, e.g.
"m_LocalScale.x", "localScale", "myComponent.Scale.y".
"""

from typing import Optional

SCALE_AXES = ('x', 'y', 'z')

# Whole-property names and their axis prefixes
TRANSFORM_SCALE = 'm_LocalScale'
TRANSFORM_SCALE_PREFIX = 'm_LocalScale.'
LOCAL_SCALE = 'localScale'
LOCAL_SCALE_PREFIX = 'localScale.'

# Substring markers that must be followed directly by an axis letter
SCALE_MARKER = 'Scale.'
NESTED_LOCAL_SCALE_MARKER = '.localScale.'


def _axis_follows(path: str, marker: str) -> bool:
    """Check the character right after the first occurrence of marker

    Args:
        path: Property path to inspect
        marker: Substring to look for

    Returns:
        bool: True if marker occurs and is immediately followed by x, y or z
    """
    index = path.find(marker)
    if index < 0:
        return False

    axis_index = index + len(marker)
    if axis_index >= len(path):
        return False

    return path[axis_index] in SCALE_AXES


def is_scale_property(path: Optional[str]) -> bool:
    """Return True if the property path names a scale channel

    Matches (case-sensitive):
        1. "m_LocalScale"
        2. "m_LocalScale." + anything
        3. "localScale"
        4. "localScale." + anything
        5. "Scale." directly followed by x, y or z (custom components)
        6. ".localScale." directly followed by x, y or z (nested transforms)

    Rules 5 and 6 inspect only the first occurrence of their marker, so
    "a.Scale.w.Scale.x" is not a scale property. Later occurrences are
    deliberately never considered.

    Never raises; None, empty and non-string input return False.
    """
    if not path or not isinstance(path, str):
        return False

    return (path == TRANSFORM_SCALE or
            path.startswith(TRANSFORM_SCALE_PREFIX) or
            path == LOCAL_SCALE or
            path.startswith(LOCAL_SCALE_PREFIX) or
            _axis_follows(path, SCALE_MARKER) or
            _axis_follows(path, NESTED_LOCAL_SCALE_MARKER))
