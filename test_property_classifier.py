#!/usr/bin/env python3
"""
Test script for the scale property classifier
Run directly (python test_property_classifier.py) or through pytest
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from core.property_classifier import is_scale_property


def test_transform_scale_names():
    assert is_scale_property("m_LocalScale")
    assert is_scale_property("m_LocalScale.x")
    assert is_scale_property("m_LocalScale.y")
    assert is_scale_property("m_LocalScale.z")


def test_local_scale_names():
    assert is_scale_property("localScale")
    assert is_scale_property("localScale.z")


def test_prefix_rules_accept_any_suffix():
    # Rules 2 and 4 only require the dotted prefix
    assert is_scale_property("m_LocalScale.w")
    assert is_scale_property("m_LocalScale.")
    assert is_scale_property("localScale.anything")


def test_component_scale_axis():
    assert is_scale_property("foo.Scale.y")
    assert is_scale_property("myComponent.Scale.x")
    assert is_scale_property("Scale.z")
    assert is_scale_property("material._Scale.x")


def test_nested_local_scale_axis():
    assert is_scale_property("root.localScale.x")
    assert is_scale_property("a.b.localScale.z")


def test_non_scale_properties():
    assert not is_scale_property("m_LocalPosition.x")
    assert not is_scale_property("m_LocalRotation.w")
    assert not is_scale_property("localEulerAnglesRaw.y")
    assert not is_scale_property("m_IsActive")
    assert not is_scale_property("m_Sprite")


def test_scale_as_part_of_other_words():
    assert not is_scale_property("scaleFactor")
    assert not is_scale_property("Scalex")
    assert not is_scale_property("m_LocalScaleX")
    assert not is_scale_property("uvScale")
    assert not is_scale_property("material._MainTex_ST.Scale")


def test_axis_must_follow_marker_directly():
    assert not is_scale_property("foo.Scale.w")
    assert not is_scale_property("foo.Scale.")
    assert not is_scale_property("foo.Scale. x")
    assert not is_scale_property("root.localScale.")
    assert not is_scale_property("root.localScale.w")
    # Only the first occurrence of the marker is inspected
    assert not is_scale_property("a.Scale.w.Scale.x")


def test_case_sensitive():
    assert not is_scale_property("m_localscale.x")
    assert not is_scale_property("M_LOCALSCALE")
    assert not is_scale_property("foo.scale.x")
    assert not is_scale_property("root.LOCALSCALE.x")


def test_empty_and_missing_input():
    assert not is_scale_property("")
    assert not is_scale_property(None)
    assert not is_scale_property(42)


def test_short_paths_do_not_raise():
    for path in ("m", "m_", "Scale", "Scale.", ".", "x", "local", ".localScale"):
        assert is_scale_property(path) is False


def test_deterministic():
    paths = ["m_LocalScale.x", "scaleFactor", "foo.Scale.y", ""]
    first = [is_scale_property(p) for p in paths]
    second = [is_scale_property(p) for p in paths]
    assert first == second == [True, False, True, False]


def main():
    """Run all tests"""
    tests = [(name, func) for name, func in sorted(globals().items())
             if name.startswith('test_') and callable(func)]

    print("=" * 60)
    print("Property Classifier Tests")
    print("=" * 60)

    failed = 0
    for name, func in tests:
        try:
            func()
            print(f"✓ PASS: {name}")
        except AssertionError as e:
            failed += 1
            print(f"✗ FAIL: {name} {e}")

    print()
    print(f"{len(tests) - failed}/{len(tests)} passed")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
