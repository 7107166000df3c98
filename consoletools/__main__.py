"""Module entrypoint for ``python -m consoletools``.

All argument parsing and runtime setup happen in ``consoletools.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
