"""Allow ``python -m iscron``."""

from iscron.cli import main

if __name__ == "__main__":
    main()
