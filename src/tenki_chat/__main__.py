"""Run the console chat with ``python -m tenki_chat``."""

import sys

from tenki_chat.cli import main

if __name__ == "__main__":
    sys.exit(main())
