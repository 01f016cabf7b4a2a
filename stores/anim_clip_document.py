#!/usr/bin/env python3
"""
Anim Clip Document Module
Pure Python editor for text-serialized Unity AnimationClip assets (.anim).

No Unity installation or YAML library required - the file is handled as a
list of lines so that everything this module does not touch is written back
byte for byte (Unity YAML uses custom tags and a fixed layout that generic
YAML dumpers do not reproduce).

Layout handled (2-space indentation, list items at their key's indent):

    --- !u!74 &7400000
    AnimationClip:
      m_Name: Walk
      m_ScaleCurves:
      - curve:
          ...
        path: Body/Arm
      m_FloatCurves:
      - curve:
          ...
        attribute: m_IsActive
        path: Body
        classID: 1
        script: {fileID: 0}
      m_ClipBindingConstant:
        genericBindings:
        - serializedVersion: 2
          path: 3373488376
          attribute: 3
          ...
"""

import zlib
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

YAML_HEADER = '%YAML'
CLIP_DOCUMENT_TAG = '--- !u!74 '
CLIP_ROOT_KEY = 'AnimationClip:'

CLIP_INDENT = 2

# Vector curve lists hold one x/y/z curve per transform path
VECTOR_CURVE_SECTIONS = {
    'm_RotationCurves': 'm_LocalRotation',
    'm_EulerCurves': 'localEulerAnglesRaw',
    'm_PositionCurves': 'm_LocalPosition',
    'm_ScaleCurves': 'm_LocalScale',
}

# Scalar curve lists are bound by attribute name
FLOAT_CURVE_SECTIONS = ('m_FloatCurves', 'm_EditorCurves', 'm_EulerEditorCurves')

# Object reference curve lists (sprites, materials, ...)
PPTR_CURVE_SECTIONS = ('m_PPtrCurves',)

SCALAR_CURVE_SECTIONS = tuple(VECTOR_CURVE_SECTIONS) + FLOAT_CURVE_SECTIONS

TRANSFORM_CLASS_ID = 4

# genericBindings attribute id for transform scale
BIND_TRANSFORM_SCALE = 3


@dataclass(frozen=True)
class CurveEntry:
    """One curve entry of an AnimationClip list

    Attributes:
        section: Clip list holding the entry (e.g. "m_FloatCurves")
        path: Transform path relative to the animated root ("" for root)
        attribute: Bound attribute, None for vector curve lists
        class_id: Unity class id of the animated component
    """
    section: str
    path: str
    attribute: Optional[str]
    class_id: int

    @property
    def property_path(self) -> str:
        if self.attribute is None:
            return VECTOR_CURVE_SECTIONS.get(self.section, self.section)
        return self.attribute


def path_hash(path: str) -> int:
    """Hash a transform path the way genericBindings store it (CRC32)"""
    return zlib.crc32(path.encode('utf-8'))


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip(' '))


def _line_ending(line: str) -> str:
    return line[len(line.rstrip('\r\n')):]


def _split_key(content: str) -> Tuple[Optional[str], str]:
    """Split 'key: value' into (key, value); (None, '') if not a mapping line"""
    key, sep, value = content.partition(':')
    if not sep:
        return None, ''
    return key.strip(), value.strip()


def _scalar(value: str) -> str:
    """Unquote a plain, single- or double-quoted YAML scalar"""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        inner = value[1:-1]
        if value[0] == "'":
            return inner.replace("''", "'")
        return inner.replace('\\"', '"').replace('\\\\', '\\')
    return value


def _to_int(value: Optional[str], default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class AnimClipDocument:
    """Editable line model of one text-serialized AnimationClip asset"""

    def __init__(self, lines: List[str]):
        self.lines = lines

    @classmethod
    def parse(cls, text: str) -> 'AnimClipDocument':
        """Build a document from file text

        Raises:
            ValueError: If the text is not a Unity YAML AnimationClip asset
        """
        if not text.startswith(YAML_HEADER):
            raise ValueError("Not a text-serialized Unity asset (missing %YAML header)")

        document = cls(text.splitlines(keepends=True))
        document._clip_bounds()
        return document

    def text(self) -> str:
        return ''.join(self.lines)

    # ------------------------------------------------------------------
    # Structure helpers
    # ------------------------------------------------------------------

    def _clip_bounds(self) -> Tuple[int, int]:
        """Locate the body of the AnimationClip document

        Returns:
            tuple: (first body line, end line) as list indices

        Raises:
            ValueError: If no AnimationClip document is present
        """
        lines = self.lines
        for i in range(len(lines) - 1):
            if lines[i].startswith(CLIP_DOCUMENT_TAG) and lines[i + 1].rstrip() == CLIP_ROOT_KEY:
                start = i + 2
                end = start
                while end < len(lines) and not lines[end].startswith('---'):
                    end += 1
                return start, end

        raise ValueError("No AnimationClip document found")

    def _find_key(self, key: str, start: int, end: int, indent: int) -> Optional[int]:
        """Find a mapping key at an exact indent within [start, end)"""
        for i in range(start, end):
            line = self.lines[i]
            content = line.strip()
            if not content or _indent(line) != indent or content.startswith('- '):
                continue
            if _split_key(content)[0] == key:
                return i
        return None

    def _block_end(self, key_line: int, indent: int, end: int) -> int:
        """Return the index after the last line belonging to a key

        List items written at the key's own indent belong to the key.
        """
        for j in range(key_line + 1, end):
            line = self.lines[j]
            content = line.strip()
            if not content:
                continue
            line_indent = _indent(line)
            if line_indent < indent or (line_indent == indent and not content.startswith('- ')):
                return j
        return end

    def _list_items(self, key_line: int, block_end: int, indent: int) -> List[Tuple[int, int]]:
        """Return (start, end) line ranges of the list items under a key"""
        starts = []
        for i in range(key_line + 1, block_end):
            line = self.lines[i]
            if _indent(line) == indent and line.strip().startswith('- '):
                starts.append(i)

        return [(start, starts[n + 1] if n + 1 < len(starts) else block_end)
                for n, start in enumerate(starts)]

    def _item_fields(self, item_start: int, item_end: int, indent: int) -> Dict[str, str]:
        """Collect the scalar fields written directly on a list item"""
        fields = {}

        first = self.lines[item_start].strip()[2:]
        key, value = _split_key(first)
        if key:
            fields[key] = _scalar(value)

        for i in range(item_start + 1, item_end):
            line = self.lines[i]
            content = line.strip()
            if not content or _indent(line) != indent + 2 or content.startswith('- '):
                continue
            key, value = _split_key(content)
            if key and key not in fields:
                fields[key] = _scalar(value)

        return fields

    def _section(self, section: str):
        """Locate a clip-level list

        Returns:
            tuple: (key line, block end) or None if absent or written as []
        """
        start, end = self._clip_bounds()
        key_line = self._find_key(section, start, end, CLIP_INDENT)
        if key_line is None:
            return None

        _, value = _split_key(self.lines[key_line].strip())
        if value:
            # Flow style, e.g. "m_ScaleCurves: []"
            return None

        return key_line, self._block_end(key_line, CLIP_INDENT, end)

    def _remove_item(self, key_line: int, block_end: int, indent: int,
                     item: Tuple[int, int], remaining: int):
        """Delete one list item; an emptied list is rewritten as '[]'"""
        item_start, item_end = item
        del self.lines[item_start:item_end]

        if remaining == 0:
            line = self.lines[key_line]
            key = line.strip().rstrip(':')
            self.lines[key_line] = f"{' ' * indent}{key}: []{_line_ending(line)}"

    # ------------------------------------------------------------------
    # Clip queries
    # ------------------------------------------------------------------

    @property
    def clip_name(self) -> str:
        start, end = self._clip_bounds()
        key_line = self._find_key('m_Name', start, end, CLIP_INDENT)
        if key_line is None:
            return ''
        return _scalar(_split_key(self.lines[key_line].strip())[1])

    def _entry_for_item(self, section: str, item: Tuple[int, int]) -> CurveEntry:
        fields = self._item_fields(item[0], item[1], CLIP_INDENT)
        path = fields.get('path', '')

        if section in VECTOR_CURVE_SECTIONS:
            return CurveEntry(section=section, path=path, attribute=None,
                              class_id=TRANSFORM_CLASS_ID)

        return CurveEntry(section=section, path=path,
                          attribute=fields.get('attribute', ''),
                          class_id=_to_int(fields.get('classID')))

    def curve_entries(self, sections) -> List[CurveEntry]:
        """List the curve entries of the given clip lists, in file order"""
        entries = []
        for section in sections:
            located = self._section(section)
            if located is None:
                continue
            key_line, block_end = located
            for item in self._list_items(key_line, block_end, CLIP_INDENT):
                entries.append(self._entry_for_item(section, item))
        return entries

    # ------------------------------------------------------------------
    # Clip edits
    # ------------------------------------------------------------------

    def remove_entry(self, entry: CurveEntry) -> bool:
        """Remove the first curve entry equal to entry

        Removing a transform scale curve also drops its generic binding.

        Returns:
            bool: True if an entry was removed, False if it was not present
        """
        located = self._section(entry.section)
        if located is None:
            return False

        key_line, block_end = located
        items = self._list_items(key_line, block_end, CLIP_INDENT)

        for item in items:
            if self._entry_for_item(entry.section, item) != entry:
                continue

            self._remove_item(key_line, block_end, CLIP_INDENT, item, len(items) - 1)

            if entry.section == 'm_ScaleCurves':
                self.remove_generic_binding(path_hash(entry.path), BIND_TRANSFORM_SCALE,
                                            TRANSFORM_CLASS_ID)
            return True

        return False

    def remove_generic_binding(self, path_crc: int, attribute: int, type_id: int) -> bool:
        """Drop a matching entry from m_ClipBindingConstant.genericBindings

        Returns:
            bool: True if a binding was removed
        """
        start, end = self._clip_bounds()
        constant_line = self._find_key('m_ClipBindingConstant', start, end, CLIP_INDENT)
        if constant_line is None:
            return False

        constant_end = self._block_end(constant_line, CLIP_INDENT, end)
        bindings_indent = CLIP_INDENT + 2
        bindings_line = self._find_key('genericBindings', constant_line + 1, constant_end,
                                       bindings_indent)
        if bindings_line is None:
            return False

        _, value = _split_key(self.lines[bindings_line].strip())
        if value:
            return False

        bindings_end = self._block_end(bindings_line, bindings_indent, constant_end)
        items = self._list_items(bindings_line, bindings_end, bindings_indent)

        for item in items:
            fields = self._item_fields(item[0], item[1], bindings_indent)
            if (_to_int(fields.get('path'), -1) == path_crc and
                    _to_int(fields.get('attribute'), -1) == attribute and
                    _to_int(fields.get('typeID'), -1) == type_id and
                    _to_int(fields.get('isPPtrCurve')) == 0):
                self._remove_item(bindings_line, bindings_end, bindings_indent, item,
                                  len(items) - 1)
                return True

        return False
