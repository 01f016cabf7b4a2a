#!/usr/bin/env python3
"""
Scale Track Remover - Command Line Version
Removes scale curves (m_LocalScale and friends) from Unity .anim clips
"""

import argparse
import io
import sys
from contextlib import redirect_stdout

from core import BatchStatus, format_result_message
from scale_track_remover import ScaleTrackRemover, VERSION

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FAILURES = 2


def build_parser():
    parser = argparse.ArgumentParser(
        prog='remove-scale',
        description='Remove scale tracks from Unity animation clips (.anim, text serialization)',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Remove scale tracks from two clips (asks for confirmation)
  python remove_scale.py Assets/Anim/Walk.anim Assets/Anim/Run.anim

  # Process every clip below a folder without prompting, keeping .bak copies
  python remove_scale.py Assets/Anim --yes --backup

Removed properties:
  m_LocalScale, m_LocalScale.*, localScale, localScale.*,
  <anything>Scale.x/y/z and <path>.localScale.x/y/z
        """
    )

    parser.add_argument('paths', nargs='+', help='.anim files and/or folders containing them')
    parser.add_argument('-y', '--yes', action='store_true',
                        help='Do not ask for confirmation')
    parser.add_argument('--backup', action='store_true',
                        help='Write <clip>.anim.bak before modifying a clip')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Only print the final summary')
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')
    return parser


def confirm(message):
    try:
        answer = input(f"{message} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ('y', 'yes')


def main(argv=None):
    args = build_parser().parse_args(argv)

    remover = ScaleTrackRemover(backup=args.backup)

    # Every component prints its progress; quiet mode discards stdout
    # while the batch runs and prints only the summary afterwards.
    progress_output = io.StringIO() if args.quiet else sys.stdout

    with redirect_stdout(progress_output):
        clips = remover.collect(args.paths)

    if not clips:
        print("Error: No animation clips selected.", file=sys.stderr)
        print("Please select one or more .anim files to remove scale tracks from.", file=sys.stderr)
        return EXIT_USAGE

    if not args.yes and not confirm(remover.confirm_message(clips)):
        print("Cancelled.")
        return EXIT_OK

    with redirect_stdout(progress_output):
        results = remover.remove_scale_tracks(clips)

    if not results['success']:
        print(f"\n✗ {results['message']}", file=sys.stderr)
        return EXIT_FAILURES

    report = results['report']
    if args.quiet:
        print(results['message'])

    if report.failures:
        print(f"\n✗ {len(report.failures)} clip(s) failed", file=sys.stderr)
        return EXIT_FAILURES

    if results['status'] == BatchStatus.SUCCESS and not args.quiet:
        print(f"✓ {format_result_message(report.modified_clips, report.total_clips)}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
