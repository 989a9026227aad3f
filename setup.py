from setuptools import setup

setup(
    name="rbt",
    version="0.0.1",
    description="red-black tree with graphviz snapshots",
    packages=["rbt"],
    install_requires=["structlog>=21.1", "colorama>=0.4.6", "graphviz>=0.20"],
    extras_require={
        "dev": ["black", "pylint", "flake8", "mypy", "pytest", "hypothesis"],
    },
    entry_points={"console_scripts": ["rbt=rbt.cli:main"]},
)
