"""Module entrypoint for ``python -m lazydig``."""

from .cli import main


if __name__ == "__main__":
    main()
