#!/usr/bin/env python3
"""
Check if Unity .anim files are text (YAML) or binary serialized
"""

import sys


def check_anim_format(filename):
    """Check if an animation clip asset is text or binary serialized"""
    try:
        with open(filename, 'rb') as f:
            # Read first 1KB
            header = f.read(1024)

            # Text assets start with: %YAML 1.1
            # Binary assets contain NUL bytes in the serialized file header

            if header.startswith(b'%YAML'):
                return "Text"
            elif b'\x00' in header:
                return "Binary"
            else:
                return f"Unknown (header: {header[:8].hex()})"
    except Exception as e:
        return f"Error: {e}"


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python check_anim_format.py <file1.anim> [file2.anim] ...")
        sys.exit(1)

    for filename in sys.argv[1:]:
        format_type = check_anim_format(filename)
        print(f"{filename}: {format_type}")
