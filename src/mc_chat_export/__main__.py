"""Module entrypoint.

Allows:
    python -m mc_chat_export -i latest.log -o chat.png -f image
"""

from __future__ import annotations

from mc_chat_export.cli import main

if __name__ == "__main__":
    main()
