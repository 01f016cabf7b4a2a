#!/usr/bin/env python3
"""
Test script for clip selection, the orchestrator and the command line
Run directly (python test_scale_track_remover.py) or through pytest
"""

import io
import sys
import tempfile
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

sys.path.insert(0, str(Path(__file__).parent))

import remove_scale
from check_anim_format import check_anim_format
from core import BatchStatus
from scale_track_remover import ScaleTrackRemover
from stores import AnimFileStore, collect_clips, is_anim_file
from test_anim_file_store import NO_SCALE_CLIP, read_raw, write_clip


def run_cli(argv):
    """Run the command line entry point, returning (exit code, stdout)"""
    out = io.StringIO()
    with redirect_stdout(out), redirect_stderr(io.StringIO()):
        code = remove_scale.main(argv)
    return code, out.getvalue()


def quiet_remover(**kwargs):
    remover = ScaleTrackRemover(progress_callback=lambda message: None, **kwargs)
    remover.log = lambda message: None
    return remover


def test_is_anim_file():
    assert is_anim_file("Walk.anim")
    assert is_anim_file(Path("Assets/Anim/Run.anim"))
    assert not is_anim_file("Walk.ANIM")
    assert not is_anim_file("Walk.anim.bak")
    assert not is_anim_file("Walk.controller")


def test_collect_clips_from_folder():
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        (root / "Sub").mkdir()
        walk = write_clip(root, "Walk.anim")
        run = write_clip(root / "Sub", "Run.anim")
        write_clip(root, "Upper.ANIM")
        (root / "notes.txt").write_text("not a clip")

        clips, skipped = collect_clips([root])

        assert clips == sorted([walk.resolve(), run.resolve()])
        assert skipped == []


def test_collect_clips_deduplicates():
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        walk = write_clip(root, "Walk.anim")
        idle = write_clip(root, "Idle.anim", NO_SCALE_CLIP)

        clips, _ = collect_clips([walk, str(walk), root, None, ""])

        assert clips == [walk.resolve(), idle.resolve()]


def test_collect_clips_skips_other_entries():
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        notes = root / "notes.txt"
        notes.write_text("not a clip")
        empty = root / "Empty"
        empty.mkdir()
        missing = root / "Missing.anim"

        clips, skipped = collect_clips([notes, empty, missing])

        assert clips == []
        assert skipped == [str(notes), str(empty), str(missing)]


def test_orchestrator_run_and_undo():
    with tempfile.TemporaryDirectory() as tmp:
        walk = write_clip(tmp, "Walk.anim")
        write_clip(tmp, "Idle.anim", NO_SCALE_CLIP)
        original = read_raw(walk)
        remover = quiet_remover()

        results = remover.run([tmp])

        assert results['success']
        assert results['status'] == BatchStatus.PARTIAL
        assert results['report'].modified_clips == 1
        assert results['report'].total_clips == 2
        assert results['message'].startswith(
            "Removed scale tracks from 1 out of 2 animation clips.")
        assert "m_LocalScale.x" not in read_raw(walk)
        assert remover.can_undo

        undone = remover.undo_last()

        assert undone['success']
        assert undone['restored'] == [walk.resolve()]
        assert read_raw(walk) == original
        assert not remover.can_undo
        assert remover.undo_last() == {'success': False, 'restored': [],
                                       'message': "Nothing to undo."}


def test_orchestrator_rescans_clips_changed_between_batches():
    with tempfile.TemporaryDirectory() as tmp:
        walk = write_clip(tmp, "Walk.anim", NO_SCALE_CLIP)
        remover = quiet_remover()

        first = remover.run([tmp])
        write_clip(tmp, "Walk.anim")
        second = remover.run([tmp])

        assert first['report'].modified_clips == 0
        assert second['report'].modified_clips == 1
        assert "m_LocalScale.x" not in read_raw(walk)


def test_orchestrator_empty_selection():
    remover = quiet_remover()

    results = remover.remove_scale_tracks([])

    assert results['success']
    assert results['status'] == BatchStatus.NOTHING_TO_DO
    assert results['message'] == "No animation clips selected."
    assert not remover.can_undo


def test_orchestrator_unexpected_error():
    class BrokenStore(AnimFileStore):
        def get_curve_bindings(self, clip):
            raise RuntimeError("parser bug")

    with tempfile.TemporaryDirectory() as tmp:
        walk = write_clip(tmp, "Walk.anim")
        store = BrokenStore()
        store.log = lambda message: None
        remover = quiet_remover(store=store)

        results = remover.remove_scale_tracks([walk])

        assert not results['success']
        assert 'report' not in results
        assert results['message'] == "Removal failed: parser bug"


def test_confirm_message_uses_clip_names():
    with tempfile.TemporaryDirectory() as tmp:
        walk = write_clip(tmp, "Walk.anim")
        idle = write_clip(tmp, "Idle.anim", NO_SCALE_CLIP)
        remover = quiet_remover()

        assert remover.confirm_message([walk]) == "Remove scale tracks from 'Walk'?"
        assert remover.confirm_message([walk, idle]) == \
            "Remove scale tracks from 2 animation clips?"


def test_cli_success():
    with tempfile.TemporaryDirectory() as tmp:
        walk = write_clip(tmp, "Walk.anim")

        code, output = run_cli([str(walk), '--yes'])

        assert code == remove_scale.EXIT_OK
        assert "✓ Successfully removed scale tracks from 1 animation clip." in output
        assert "m_LocalScale.x" not in read_raw(walk)


def test_cli_quiet_prints_summary_only():
    with tempfile.TemporaryDirectory() as tmp:
        write_clip(tmp, "Walk.anim")
        write_clip(tmp, "Idle.anim", NO_SCALE_CLIP)

        code, output = run_cli([tmp, '--yes', '--quiet'])

        assert code == remove_scale.EXIT_OK
        assert output.startswith("Removed scale tracks from 1 out of 2 animation clips.")
        assert "[1/2]" not in output


def test_cli_quiet_success_prints_summary_once():
    with tempfile.TemporaryDirectory() as tmp:
        write_clip(tmp, "Walk.anim")

        code, output = run_cli([tmp, '--yes', '--quiet'])

        assert code == remove_scale.EXIT_OK
        assert output.count("Successfully removed scale tracks") == 1
        assert "✓" not in output


def test_cli_no_clips():
    with tempfile.TemporaryDirectory() as tmp:
        notes = Path(tmp) / "notes.txt"
        notes.write_text("not a clip")

        code, _ = run_cli([str(notes), '--yes'])

        assert code == remove_scale.EXIT_USAGE


def test_cli_failures_exit_code():
    with tempfile.TemporaryDirectory() as tmp:
        write_clip(tmp, "Walk.anim")
        (Path(tmp) / "Binary.anim").write_bytes(b'\x00\x00\x00\xff\xfe\x00')

        code, _ = run_cli([tmp, '--yes'])

        assert code == remove_scale.EXIT_FAILURES


def test_cli_declined_confirmation_leaves_files():
    with tempfile.TemporaryDirectory() as tmp:
        walk = write_clip(tmp, "Walk.anim")
        original = read_raw(walk)

        with mock.patch('builtins.input', return_value='n'):
            code, output = run_cli([str(walk)])

        assert code == remove_scale.EXIT_OK
        assert "Cancelled." in output
        assert read_raw(walk) == original


def test_cli_confirm_on_closed_input():
    with mock.patch('builtins.input', side_effect=EOFError):
        assert remove_scale.confirm("Remove scale tracks from 'Walk'?") is False
    with mock.patch('builtins.input', return_value=' Yes '):
        assert remove_scale.confirm("Remove scale tracks from 'Walk'?") is True


def test_cli_backup_flag():
    with tempfile.TemporaryDirectory() as tmp:
        walk = write_clip(tmp, "Walk.anim")
        original = read_raw(walk)

        code, _ = run_cli([str(walk), '--yes', '--backup'])

        assert code == remove_scale.EXIT_OK
        assert read_raw(walk.with_name("Walk.anim.bak")) == original


def test_check_anim_format():
    with tempfile.TemporaryDirectory() as tmp:
        text_clip = write_clip(tmp, "Walk.anim")
        binary_clip = Path(tmp) / "Binary.anim"
        binary_clip.write_bytes(b'\x00\x00\x00\x00\x00\x00\x01\x00')
        other = Path(tmp) / "Other.anim"
        other.write_text("hello")

        assert check_anim_format(text_clip) == "Text"
        assert check_anim_format(binary_clip) == "Binary"
        assert check_anim_format(other).startswith("Unknown")
        assert check_anim_format(Path(tmp) / "Missing.anim").startswith("Error")


def test_package_metadata_has_no_readme_key():
    pyproject = Path(__file__).parent / "pyproject.toml"

    assert "readme" not in pyproject.read_text(encoding='utf-8')


def main():
    """Run all tests"""
    tests = [(name, func) for name, func in sorted(globals().items())
             if name.startswith('test_') and callable(func)]

    print("=" * 60)
    print("Scale Track Remover Tests")
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
