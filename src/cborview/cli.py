from __future__ import annotations
import argparse, json, logging, sys

from .binary.errors import CborError
from .binary.constants import DEFAULT_TEXT_LIMIT


def _input_bytes(args) -> bytes:
    from .binary.reader import load_bytes, load_hex
    if args.hex:
        src = sys.stdin.read() if args.input == "-" else args.input
        return load_hex(src)
    if args.input == "-":
        return sys.stdin.buffer.read()
    return load_bytes(args.input)


def cmd_text(args):
    from .binary.reader import render_all
    for line in render_all(_input_bytes(args), max_chars=args.max_chars):
        print(line)
    return 0


def cmd_info(args):
    from .binary.reader import summarize
    items = summarize(
        _input_bytes(args),
        max_items=args.max_items,
        max_chars=args.max_chars,
        with_text=not args.no_text,
    )
    print(json.dumps([it.model_dump(mode="json") for it in items], indent=2))
    if not items:
        print("Warning: no items found in input", file=sys.stderr)
    return 0


def cmd_skip(args):
    from .binary.reader import iter_items
    count = 0
    for off, n in iter_items(_input_bytes(args), max_items=args.max_items):
        print(f"{off}\t{n}")
        count += 1
    print(f"items={count}", file=sys.stderr)
    return 0


def build_parser():
    p = argparse.ArgumentParser(prog="cborview", description="CBOR decoding and text rendering")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd")

    def _common(sp):
        sp.add_argument("input", help="path to a CBOR file, a hex string with --hex, or - for stdin")
        sp.add_argument("--hex", action="store_true", help="input is hex text rather than binary")

    sp = sub.add_parser("text", help="print each top-level item as text")
    _common(sp)
    sp.add_argument("--max-chars", type=int, default=DEFAULT_TEXT_LIMIT, help="output limit per item")
    sp.set_defaults(func=cmd_text)

    sp = sub.add_parser("info", help="print a JSON summary of the top-level items")
    _common(sp)
    sp.add_argument("--max-items", type=int, default=None, help="stop after N items")
    sp.add_argument("--max-chars", type=int, default=DEFAULT_TEXT_LIMIT, help="output limit per item")
    sp.add_argument("--no-text", action="store_true", help="omit the rendered text")
    sp.set_defaults(func=cmd_info)

    sp = sub.add_parser("skip", help="print offset and length of each top-level item")
    _common(sp)
    sp.add_argument("--max-items", type=int, default=None, help="stop after N items")
    sp.set_defaults(func=cmd_skip)

    return p


def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    if not hasattr(ns, "func"):
        p.print_help()
        return 2
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        return ns.func(ns)
    except CborError as e:
        print(f"error: {e.code.name}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        # bad hex input
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
