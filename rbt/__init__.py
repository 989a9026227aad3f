from .rbtree import RBTree, Node, NodeView, Color, Side, Outcome
from .dot import DotExporter
from .driver import Driver, Options

__all__ = [
    "RBTree",
    "Node",
    "NodeView",
    "Color",
    "Side",
    "Outcome",
    "DotExporter",
    "Driver",
    "Options",
]
