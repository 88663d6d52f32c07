import sys
import logging
import argparse

from ordered_tree import OrderedTree


"""
Sorts its arguments by inserting them into an OrderedTree and
walking the tree with its in-order iterator.

Numbers are compared numerically. Pass --strings to compare the
arguments as plain text instead.

sample usage:

python3 tree_sort.py 5 3 8 1 4 7 9
"""


logger = logging.getLogger(__name__)


def parse_value(text):
    try:
        return int(text)
    except ValueError:
        return float(text)


def parse_values(args, strings=False):
    if strings:
        return list(args)
    return [parse_value(arg) for arg in args]


def sort_values(values):
    tree = OrderedTree()
    for value in values:
        tree.insert(value)
    logger.debug('built tree with %d values', len(tree))

    result = []
    iterator = tree.create_iterator()
    while iterator.has_more():
        result.append(iterator.advance())
    return result


def main(values, strings=False, out=None):
    try:
        parsed = parse_values(values, strings=strings)
    except ValueError as ex:
        print('Error parsing values, error = ', ex, '(use --strings to sort text)', file=sys.stderr)
        return 2

    print(' '.join(str(value) for value in sort_values(parsed)), file=out or sys.stdout)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description='Sort values with a binary search tree.')
    parser.add_argument('values', nargs='*', help='values to sort')
    parser.add_argument('--strings', '-s', action='store_true',
                        help='compare values as text instead of numbers')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='log tree operations to stderr')
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')
    return main(args.values, strings=args.strings)


if __name__ == '__main__':
    sys.exit(cli())
