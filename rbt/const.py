LEFT = "L"
RIGHT = "R"
NIL = "NIL"
RED_FILL = "red"

DOT_GRAPH_NAME = "G"
DOT_GRAPH_ATTR = {"ratio": ".48"}
DOT_NODE_ATTR = {
    "style": "filled",
    "color": "black",
    "shape": "circle",
    "width": ".6",
    "fontname": "Helvetica",
    "fontweight": "bold",
    "fontcolor": "white",
    "fontsize": "24",
    "fixedsize": "true",
}
DOT_NIL_ATTR = {
    "label": NIL,
    "shape": "record",
    "width": ".4",
    "height": ".25",
    "fontsize": "16",
}
DOT_NIL_PREFIX = "n"
DOT_SUFFIX = ".dot"

DEFAULT_COUNT = 15
DEFAULT_UPPER = 100
SNAPSHOT_PREFIX = "insert_step_"
INDENT = "    "
