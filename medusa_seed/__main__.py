import sys

from medusa_seed.cli import main

if __name__ == "__main__":
    sys.exit(main())
