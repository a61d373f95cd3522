#!/usr/bin/env python3
"""
HighlightKit CLI - Direct Entry Point
======================================
Run this file directly to use the HighlightKit CLI without installing it.

Usage:
    python run.py show app.py           # Highlight a file
    python run.py detect snippet.txt    # Guess a file's language
    python run.py --help                # Show all commands
"""

import sys
import os

# Add parent directory to path if running directly
if __name__ == "__main__":
    script_dir = os.path.dirname(os.path.abspath(__file__))
    if script_dir not in sys.path:
        sys.path.insert(0, script_dir)


def main():
    """Main entry point"""
    try:
        from highlightkit.cli.main import main_entry
        main_entry()
    except ImportError as e:
        print(f"Import Error: {e}")
        print("\nMake sure you've installed dependencies:")
        print("  pip install -e .")
        print("\nOr install required packages:")
        print("  pip install rich typer pyyaml pygments")
        sys.exit(1)


if __name__ == "__main__":
    main()
