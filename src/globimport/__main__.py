"""Allow running as ``python -m globimport``."""
from globimport.cli import main

if __name__ == "__main__":
    main()
