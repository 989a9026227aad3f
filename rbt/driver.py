from os import path
from random import Random
from typing import Any, Iterable, List, Optional
from dataclasses import dataclass, field
from structlog import get_logger
from rbt import const as k, dot, errors as err, rbtree as rbt

_LOGGER = get_logger()


@dataclass
class Options:
    """driver config"""

    count: int = k.DEFAULT_COUNT
    upper: int = k.DEFAULT_UPPER
    seed: Optional[int] = None
    out_dir: str = "."
    prefix: str = k.SNAPSHOT_PREFIX
    dot: bool = True

    def check(self) -> None:
        """reject configs that could never finish"""

        if self.count < 0:
            raise err.InvalidOptions(f"count must not be negative, got {self.count}")
        if self.count > self.upper:
            raise err.InvalidOptions(
                f"cannot draw {self.count} unique keys below {self.upper}"
            )


@dataclass
class Driver:
    """inserts keys one at a time and snapshots the tree after each insert"""

    options: Options = field(default_factory=Options)
    tree: rbt.RBTree[int] = field(init=False)
    step: int = field(init=False, default=0)
    snapshots: List[str] = field(init=False, default_factory=list)
    logger: Any = field(init=False)

    def __post_init__(self):
        """override"""

        self.tree = rbt.RBTree[int]()
        self.logger = _LOGGER.bind(seed=self.options.seed)
        self._random = Random(self.options.seed)
        self._exporter = dot.DotExporter()

    def run(self) -> rbt.RBTree[int]:
        """draw random keys until count unique ones are in the tree"""

        self.options.check()
        self.logger.info(
            "driver.start", count=self.options.count, upper=self.options.upper
        )

        while len(self.tree) < self.options.count:
            self.insert(self._random.randrange(self.options.upper))

        self.logger.info("driver.done", size=len(self.tree), height=self.tree.height())

        return self.tree

    def insert_all(self, keys: Iterable[int]) -> List[rbt.Outcome]:
        """insert a fixed sequence of keys"""

        outcomes = [self.insert(key) for key in keys]
        self.logger.info("driver.done", size=len(self.tree), height=self.tree.height())

        return outcomes

    def insert(self, key: int) -> rbt.Outcome:
        """insert one key, validate and snapshot on success"""

        outcome = self.tree.insert(key)

        if outcome is rbt.Outcome.DUPLICATE_KEY:
            self.logger.debug("driver.duplicate", key=key)
            return outcome

        self.tree.validate()
        self.step += 1
        self.logger.info(
            "driver.insert",
            key=key,
            step=self.step,
            black_height=self.tree.black_height(),
        )

        if self.options.dot:
            self._snapshot()

        return outcome

    def _snapshot(self) -> str:
        """write the current tree to <prefix><step>.dot"""

        filename = f"{self.options.prefix}{self.step}{k.DOT_SUFFIX}"
        written = self._exporter.write(
            self.tree, path.join(self.options.out_dir, filename)
        )
        self.snapshots.append(written)
        self.logger.debug("driver.snapshot", path=written)

        return written
