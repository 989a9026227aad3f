from argparse import ArgumentParser
from timeit import timeit
from random import Random
from structlog import get_logger
from rbt import rbtree as rbt

LOGGER = get_logger()


def main():
    """time inserts of random keys"""

    parser = ArgumentParser()
    parser.add_argument(
        "-z", "--set-size", type=int, help="number of keys to insert", default=100000
    )
    parser.add_argument("-s", "--seed", type=int, help="random seed", default=0)
    parser.add_argument(
        "--sorted", action="store_true", help="insert keys in ascending order"
    )

    args = parser.parse_args()
    keys = Random(args.seed).sample(range(args.set_size * 10), args.set_size)

    if args.sorted:
        keys.sort()

    tree = rbt.RBTree[int]()

    def populate():
        for key in keys:
            tree.insert(key)

    LOGGER.info("config", set_size=args.set_size, seed=args.seed, sorted=args.sorted)
    elapsed = timeit(populate, number=1)
    tree.validate()
    LOGGER.info(
        "done",
        elapsed=elapsed,
        height=tree.height(),
        black_height=tree.black_height(),
    )


if __name__ == "__main__":
    main()
