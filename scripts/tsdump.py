#!/usr/bin/env python3
'''
Dump a Time Series file as text

 $ DEBUG=1 ./scripts/tsdump.py -h /path/to/file.ts header.txt
'''
import sys

from codarts.cli import main, setup_logging


if __name__ == '__main__':
    setup_logging()
    sys.exit(main(['tsdump'] + sys.argv[1:]))
