#!/usr/bin/env python3
"""
Social profile enrichment

Reads one identity record from a Google Sheet, finds the person on the
social platform, opens the matching profile and extracts contact, employer,
location, relationship and follower details.

Examples:
  python main.py run
  python main.py run --record-index 0 --close-browser
  python main.py records
  python main.py parse-bio --text "Works at Example Pty Ltd"
"""

from cli import main


if __name__ == '__main__':
    main()
