# pylint:disable=redefined-outer-name

from pytest import fixture, raises
from rbt import driver as drv, errors as err, rbtree as rbt


@fixture
def options(tmp_path) -> drv.Options:
    """writes into a scratch dir"""

    return drv.Options(count=10, upper=20, seed=7, out_dir=str(tmp_path))


def test_run(options, tmp_path):
    driver = drv.Driver(options=options)
    tree = driver.run()

    assert len(tree) == 10
    assert all(0 <= key < 20 for key in tree)
    assert driver.step == 10
    assert len(driver.snapshots) == 10
    assert sorted(p.name for p in tmp_path.iterdir()) == sorted(
        f"insert_step_{i}.dot" for i in range(1, 11)
    )
    tree.validate()


def test_seed_is_deterministic():
    first = drv.Driver(options=drv.Options(seed=3, dot=False)).run()
    second = drv.Driver(options=drv.Options(seed=3, dot=False)).run()

    assert list(first.preorder()) == list(second.preorder())


def test_snapshot_tracks_growth(options, tmp_path):
    driver = drv.Driver(options=options)
    driver.insert_all([10, 20, 30])

    first = (tmp_path / "insert_step_1.dot").read_text()
    last = (tmp_path / "insert_step_3.dot").read_text()

    assert "->" in first and "20" not in first
    assert "20 -> 10" in last


def test_insert_all_skips_duplicates(options, tmp_path):
    driver = drv.Driver(options=options)
    outcomes = driver.insert_all([5, 5, 3])

    assert outcomes == [
        rbt.Outcome.OK,
        rbt.Outcome.DUPLICATE_KEY,
        rbt.Outcome.OK,
    ]
    assert driver.step == 2
    assert len(list(tmp_path.iterdir())) == 2


def test_custom_prefix(tmp_path):
    options = drv.Options(count=2, upper=2, out_dir=str(tmp_path), prefix="t")
    drv.Driver(options=options).run()

    assert sorted(p.name for p in tmp_path.iterdir()) == ["t1.dot", "t2.dot"]


def test_zero_count(options):
    options.count = 0

    assert len(drv.Driver(options=options).run()) == 0


def test_impossible_options(options):
    options.count = 21

    with raises(err.InvalidOptions):
        drv.Driver(options=options).run()

    options.count = -1

    with raises(err.InvalidOptions):
        drv.Driver(options=options).run()
