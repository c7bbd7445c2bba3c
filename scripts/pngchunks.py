#!/usr/bin/env python3
import logging
import sys
import os

from pngstash import commands
from pngstash.exceptions import PNGStashException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'''usage: {progname} <command> <png file path> [arguments...]

 encode <png file path> <chunk type> <message> [output file path]
 decode <png file path> <chunk type>
 remove <png file path> <chunk type>
 print  <png file path>

The chunk type must be four ASCII letters, for example

 $ {progname} encode image.png ruSt "This is a secret message"

if the file doesn't exist a PNG containing only the new chunk is created.''')
    sys.exit(1)


def run(progname, command, path, args):
    if command == 'encode' and len(args) in (2, 3):
        commands.encode(path, *args)
        print('Encoding successful')
    elif command == 'decode' and len(args) == 1:
        print(f'Decoded: {commands.decode(path, args[0])}')
    elif command == 'remove' and len(args) == 1:
        print(f'Removed: {commands.remove(path, args[0])}')
    elif command == 'print' and len(args) == 0:
        print(commands.print_chunks(path))
    else:
        usage(progname)


def main(argv):
    if len(argv) < 3:
        usage(argv[0])

    try:
        run(argv[0], argv[1], argv[2], argv[3:])
    except (PNGStashException, OSError) as e:
        logger.error(f'{e}')
        sys.exit(1)


if __name__ == '__main__':
    main(sys.argv)
