from typing import Optional
from graphviz import Digraph
from rbt import const as k, rbtree as rbt, types


class DotExporter:
    """
    renders a tree snapshot as a graphviz digraph. red nodes get a red fill,
    absent children become numbered NIL placeholders so every node has an
    L and an R edge
    """

    def __init__(self, name: str = k.DOT_GRAPH_NAME):
        self.name = name

    def graph(self, tree: rbt.RBTree) -> Digraph:
        """build the digraph, walking the tree in pre-order"""

        graph = Digraph(
            name=self.name, graph_attr=k.DOT_GRAPH_ATTR, node_attr=k.DOT_NODE_ATTR
        )
        nil_count = 0

        for view in tree.preorder():
            name = str(view.key)

            if view.is_red:
                graph.node(name, fillcolor=k.RED_FILL)

            children = (
                (k.LEFT, view.has_left, view.left_key),
                (k.RIGHT, view.has_right, view.right_key),
            )

            for label, present, child in children:
                if present:
                    graph.edge(name, str(child), label=label)
                    continue

                nil_count += 1
                nil_name = f"{k.DOT_NIL_PREFIX}{nil_count}"
                graph.node(nil_name, **k.DOT_NIL_ATTR)
                graph.edge(name, nil_name, label=label)

        return graph

    def source(self, tree: rbt.RBTree) -> str:
        """dot text for the tree"""

        return self.graph(tree).source

    def write(
        self, tree: rbt.RBTree, path: types.Path, directory: Optional[str] = None
    ) -> str:
        """save dot text to path, returns the path written"""

        return self.graph(tree).save(filename=path, directory=directory)
