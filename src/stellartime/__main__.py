"""Allow running the command line interface with ``python -m stellartime``."""

# Local Imports
from . import main

if __name__ == "__main__":
    main()
