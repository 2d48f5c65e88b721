"""Allow running gitsh with ``python -m gitsh``."""

from .cli import main


if __name__ == '__main__':
    main()
