"""Allow ``python -m fwstep``."""

from fwstep.cli import main

if __name__ == "__main__":
    main()
