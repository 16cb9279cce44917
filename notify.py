import sys

from discord_notify.cli import main

if __name__ == '__main__':
    sys.exit(main())
