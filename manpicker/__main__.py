"""Module entrypoint for ``python -m manpicker``.

All argument parsing and runtime setup happen in ``manpicker.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
