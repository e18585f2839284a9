# Copyright (C) 2019 Björn Lindqvist <bjourne@gmail.com>
#
# Command line front end for the mangler.
"""Symbol name mangler

Usage:
    symmangle [options] [--private | --linker-private] [<name>...]

Names are read from stdin, one per line, when none are given.

Options:
    -h --help                       show this screen
    -v --verbose                    print more output
    --prefix=<s>                    default prefix [default: ]
    --private-prefix=<s>            prefix for private symbols [default: ]
    --linker-private-prefix=<s>     prefix for linker private symbols [default: ]
    --quotes                        quote names instead of escaping them
    --private                       mangle as private symbols
    --linker-private                mangle as linker private symbols
    --no-prefix                     do not prefix the names
"""
from docopt import docopt
from symmangle.mangler import (DEFAULT, LINKER_PRIVATE, NO_PREFIX_MARKER,
                               PRIVATE, InvalidInput, Mangler)
import sys
from sys import exit, stdin

def read_names(args):
    if args['<name>']:
        return args['<name>']
    return [line.rstrip('\n') for line in stdin]

def main(argv = None):
    args = docopt(__doc__, argv = argv, version = 'symmangle 1.0')
    mangler = Mangler(args['--prefix'],
                      args['--private-prefix'],
                      args['--linker-private-prefix'],
                      use_quotes = args['--quotes'])
    prefix_kind = DEFAULT
    if args['--private']:
        prefix_kind = PRIVATE
    elif args['--linker-private']:
        prefix_kind = LINKER_PRIVATE
    mode = 'quoted' if mangler.use_quotes else 'unquoted'
    marker = chr(NO_PREFIX_MARKER) if args['--no-prefix'] else ''

    status = 0
    for name in read_names(args):
        if args['--verbose']:
            print('Mangling `%s` (%s, %s)' % (name, prefix_kind, mode),
                  file = sys.stderr)
        try:
            print(mangler.mangle_name(marker + name, prefix_kind))
        except InvalidInput as e:
            print(e, file = sys.stderr)
            status = 1
    return status

if __name__ == '__main__':
    exit(main())
