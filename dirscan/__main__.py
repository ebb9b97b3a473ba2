"""Module entrypoint for ``python -m dirscan``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and scanning happen in ``dirscan.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
