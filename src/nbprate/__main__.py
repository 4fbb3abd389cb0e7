# src/nbprate/__main__.py
"""Allow ``python -m nbprate CODE START END``."""
import sys

from nbprate.app import main

if __name__ == "__main__":
    sys.exit(main())
