from __future__ import annotations
import typing
import argparse

from lookahead_lib import all as lookahead
from lookahead_lib.utils import set_debug


parser = argparse.ArgumentParser(
    description="""
    An interactive tool for some manual testing of the library.
    Builds a stream out of the given values (a value of the form "A..B" becomes
    a producer of the integers from A to B, exclusive) and prints it.
    """
)
parser.add_argument("values", nargs="*", help="stream items")
parser.add_argument("--peek", type=int, default=None, metavar="N",
                    help="peek at the N-th value before reading the stream")
parser.add_argument("--unget", nargs="+", default=[], metavar="VALUE",
                    help="items to push back after peeking")
parser.add_argument("--debug", action="store_true", help="trace the stream internals")


def parse_item(text: str) -> typing.Any:
    """
    "A..B" becomes a producer of the integers from A to B; anything else stays a string
    """
    
    start, sep, stop = text.partition("..")
    
    if not sep:
        return text
    
    try:
        return lookahead.counter(int(start), int(stop))
    except ValueError:
        return text


def main() -> int:
    args = parser.parse_args()
    
    set_debug(args.debug)
    
    stream = lookahead.LookaheadStream(*map(parse_item, args.values))
    
    if args.peek is not None:
        try:
            print(f"peek({args.peek}) = {stream.peek(args.peek)!r}")
        except lookahead.InvalidArgument as e:
            parser.error(str(e))
    
    stream.unget(*map(parse_item, args.unget))
    
    print(" ".join(map(str, stream)))
    
    return 0


if __name__ == "__main__":
    exit(main())
