"""Module entrypoint for ``python -m herocards``.

All argument parsing and session setup happen in ``herocards.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
