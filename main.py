"""
Play Mr. White on one shared terminal.

Usage:
    python main.py --players "Ana,Ben,Cleo,Dev" --words https://example.com/words.txt
"""

from mrwhite.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
