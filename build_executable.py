#!/usr/bin/env python3
"""
Build script for creating standalone executables using PyInstaller
Run this after installing the build extra: pip install .[build]
"""

import PyInstaller.__main__
import sys


def build():
    """Build standalone executable"""

    # Determine platform
    if sys.platform.startswith('win'):
        exe_name = 'RemoveScaleCurves.exe'
        icon_option = []  # Add '--icon=icon.ico' if you have an icon file
    elif sys.platform.startswith('darwin'):
        exe_name = 'RemoveScaleCurves'
        icon_option = []  # Add '--icon=icon.icns' if you have an icon file
    else:
        exe_name = 'RemoveScaleCurves'
        icon_option = []

    print("=" * 50)
    print("Building Standalone Executable")
    print("=" * 50)
    print(f"Platform: {sys.platform}")
    print(f"Output: {exe_name}")
    print("=" * 50)

    # PyInstaller arguments
    args = [
        'remove_scale_gui.py',
        '--name=' + exe_name,
        '--onefile',  # Single executable file
        '--windowed',  # No console window (GUI mode)
        '--clean',
        '--noconfirm',
        # Orchestrator
        '--hidden-import=scale_track_remover',
        # Core module
        '--hidden-import=core',
        '--hidden-import=core.property_classifier',
        '--hidden-import=core.batch_remover',
        '--hidden-import=core.batch_report',
        '--hidden-import=core.errors',
        '--hidden-import=core.messages',
        # Stores module
        '--hidden-import=stores',
        '--hidden-import=stores.base_store',
        '--hidden-import=stores.anim_clip_document',
        '--hidden-import=stores.anim_file_store',
    ] + icon_option

    # Run PyInstaller
    try:
        PyInstaller.__main__.run(args)

        print("\n" + "=" * 50)
        print("Build Complete!")
        print("=" * 50)

        if sys.platform.startswith('win'):
            print(f"\nExecutable location: dist\\{exe_name}")
        else:
            print(f"\nExecutable location: dist/{exe_name}")

        print("\nDrop .anim files onto the executable to open them in the panel.")

    except Exception as e:
        print(f"\nBuild failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    build()
