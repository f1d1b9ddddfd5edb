import sys
from .driver import run

try:
    sys.exit(run())
except (KeyboardInterrupt, EOFError):
    print("Interrupted")
    sys.exit(1)
