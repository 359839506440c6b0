"""Allow ``python -m showcase_gateway``."""

from .main import main

if __name__ == "__main__":
    main()
