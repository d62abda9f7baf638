"""Allow ``python -m gostructify``."""

from .cli import main

if __name__ == "__main__":
    main()
