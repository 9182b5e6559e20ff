"""Allow running Tablux with ``python -m tablux``."""

from tablux.tui.app import main

if __name__ == "__main__":
    main()
