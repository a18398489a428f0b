"""Module entrypoint for ``python -m dirzip``.

All argument parsing and archiving happen in ``dirzip.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
