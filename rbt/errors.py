class StructuralInconsistency(Exception):
    """node is not where its parent link says it is"""


class InvariantViolation(Exception):
    """red-black or bst property does not hold"""


class EmptyTree(Exception):
    """no keys"""


class InvalidOptions(Exception):
    """driver config can't be satisfied"""
