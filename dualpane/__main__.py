"""Module entrypoint for ``python -m dualpane``."""

from .cli import main


if __name__ == "__main__":
    main()
