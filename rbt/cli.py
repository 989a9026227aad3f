import logging
import sys
from argparse import ArgumentParser, ArgumentTypeError
from typing import List, Optional
import structlog
from colorama import just_fix_windows_console
from rbt import const as k, driver as drv, errors as err, term


def _parse_keys(text: str) -> List[int]:
    """comma separated ints"""

    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise ArgumentTypeError(f"invalid key list: {text!r}") from exc


def _parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="rbt", description="grow a red-black tree, one dot file per insert"
    )
    parser.add_argument(
        "-n",
        "--count",
        help="unique keys to insert",
        default=k.DEFAULT_COUNT,
        type=int,
    )
    parser.add_argument(
        "-u",
        "--upper",
        help="keys are drawn below this",
        default=k.DEFAULT_UPPER,
        type=int,
    )
    parser.add_argument("-s", "--seed", help="random seed", type=int)
    parser.add_argument(
        "-k", "--keys", help="insert these keys instead", type=_parse_keys
    )
    parser.add_argument(
        "-o", "--out-dir", help="snapshot directory", default=".", type=str
    )
    parser.add_argument(
        "-p",
        "--prefix",
        help="snapshot file prefix",
        default=k.SNAPSHOT_PREFIX,
        type=str,
    )
    parser.add_argument("--no-dot", help="skip dot snapshots", action="store_true")
    parser.add_argument("--show", help="print the final tree", action="store_true")
    parser.add_argument("-v", "--verbose", help="debug logging", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """fire it up"""

    parser = _parser()
    args = parser.parse_args(argv)

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if args.verbose else logging.INFO
        )
    )

    options = drv.Options(
        count=args.count,
        upper=args.upper,
        seed=args.seed,
        out_dir=args.out_dir,
        prefix=args.prefix,
        dot=not args.no_dot,
    )
    driver = drv.Driver(options=options)

    try:
        if args.keys is not None:
            driver.insert_all(args.keys)
        else:
            driver.run()
    except err.InvalidOptions as exc:
        parser.error(str(exc))

    if args.show:
        just_fix_windows_console()
        print(term.render(driver.tree, color=sys.stdout.isatty()))

    return 0


if __name__ == "__main__":
    sys.exit(main())
