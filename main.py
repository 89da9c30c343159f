import sys

from querier.core import main

if __name__ == "__main__":
    sys.exit(main())
