#!/usr/bin/env python3
'''
Generate a Time Series file from its textual representation, usually
an edited output of tsdump
'''
import sys

from codarts.cli import main, setup_logging


if __name__ == '__main__':
    setup_logging()
    sys.exit(main(['tsgen'] + sys.argv[1:]))
