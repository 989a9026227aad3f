from typing import List
from colorama import Fore, Style
from rbt import const as k, rbtree as rbt

_BRANCHES = {None: "", rbt.Side.RIGHT: "/-- ", rbt.Side.LEFT: "\\-- "}


def _label(view: rbt.NodeView, color: bool) -> str:
    """key text, red keys highlighted"""

    if not color:
        return f"{view.key}({'R' if view.is_red else 'B'})"

    if view.is_red:
        return f"{Fore.RED}{view.key}{Style.RESET_ALL}"

    return f"{Style.BRIGHT}{view.key}{Style.RESET_ALL}"


def render(tree: rbt.RBTree, color: bool = True) -> str:
    """
    sideways drawing: right subtree above its parent, left subtree below,
    one line per node indented by depth
    """

    lines: List[str] = []

    for view in reversed(list(tree.inorder())):
        indent = k.INDENT * view.depth
        lines.append(f"{indent}{_BRANCHES[view.side]}{_label(view, color)}")

    return "\n".join(lines)
