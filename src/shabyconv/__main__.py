import sys

from .main import main

try:
    sys.exit(main())
except KeyboardInterrupt:
    print('\nReceived escape sequence')
