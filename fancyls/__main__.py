"""Module entrypoint for ``python -m fancyls``."""

from .cli import main


if __name__ == "__main__":
    main()
