from typing import Any, Callable, TypeVar

T = TypeVar("T")
ComparisonKey = Callable[[Any], Any]
Path = str
