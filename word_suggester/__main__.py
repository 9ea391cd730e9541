import sys

from word_suggester.cli import main

if __name__ == "__main__":
    sys.exit(main())
