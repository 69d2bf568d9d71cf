import argparse
import logging
import sys
from typing import List, Optional

from .combinators import eof
from .grammar import jsonValue, readJsonValue
from .input import ParserError


def _cli(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="ratjson", description="Parse a JSON file into an exact value tree")
    ap.add_argument("file", help="JSON file to parse")
    ap.add_argument("--strict", action="store_true", help="reject input left over after the value")
    ap.add_argument("--encoding", default="utf-8", help="file encoding (default: utf-8)")
    ap.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _cli(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    parser = jsonValue << eof if args.strict else jsonValue
    try:
        res = readJsonValue(args.file, encoding=args.encoding, parser=parser)
    except (OSError, UnicodeDecodeError) as e:
        print(f"[ERROR] Cannot read {args.file}: {e}", file=sys.stderr)
        return 2

    if isinstance(res, ParserError):
        print(f"[ERROR] Parser failed at character {res.loc}: {res.msg}", file=sys.stderr)
        return 1
    inp, ast = res
    print("[INFO] Parsed as:", ast)
    print("[INFO] Remaining input:", repr(inp.rest))
    return 0


if __name__ == "__main__":
    sys.exit(main())
