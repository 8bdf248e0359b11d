'''
Command line: the action depends on the name the program is invoked with

    $ tsdump [-h] <ts file> <text file>
    $ tsgen <text file> <ts file>

or, with any other name, on the first argument

    $ codarts tsdump [-h] <ts file> <text file>
'''
import io
import logging
import os
import sys

from .exceptions import TimeSeriesException
from .fields import TEXT_ENCODING
from .timeseries import dump, generate, unpack_file


logger = logging.getLogger(__name__)

MODES = ('tsdump', 'tsgen')


def setup_logging():
    logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)


def usage(progname, mode=None):
    if mode in (None, 'tsdump'):
        print(f'usage: {progname} [-h] <ts file> <text file>')
        print('  -h  dump only the header')
    if mode in (None, 'tsgen'):
        print(f'usage: {progname} <text file> <ts file>')

    return 1


def tsdump(infile, outfile, header_only=False):
    timeseries = unpack_file(infile)

    out = io.StringIO()
    dump(timeseries, out, header_only=header_only)

    with open(outfile, 'w', encoding=TEXT_ENCODING, newline='\n') as f:
        f.write(out.getvalue())


def tsgen(infile, outfile):
    with open(infile, 'r', encoding=TEXT_ENCODING, newline='') as f:
        data = generate(f)

    with open(outfile, 'wb') as f:
        f.write(data)

    logger.info('written %d bytes to \'%s\'', len(data), outfile)


def main(argv=None):
    argv = list(sys.argv if argv is None else argv)
    progname = os.path.basename(argv[0]) if argv else 'codarts'
    args = argv[1:]

    mode, _ = os.path.splitext(progname)
    if mode not in MODES:
        if not args or args[0] not in MODES:
            return usage(progname)
        mode = args.pop(0)
        progname = f'{progname} {mode}'

    header_only = False
    if mode == 'tsdump' and args and args[0] == '-h':
        header_only = True
        args.pop(0)

    if len(args) != 2:
        return usage(progname, mode)

    infile, outfile = args

    try:
        if mode == 'tsdump':
            tsdump(infile, outfile, header_only=header_only)
        else:
            tsgen(infile, outfile)
    except TimeSeriesException as e:
        print(f'{progname}: {e}', file=sys.stderr)
        return 1
    except OSError as e:
        print(f'{progname}: {e}', file=sys.stderr)
        return 1

    return 0


def run():
    setup_logging()
    sys.exit(main())


if __name__ == '__main__':
    run()
