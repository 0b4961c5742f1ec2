"""
Multi-point evaluation over a product tree.

The tree is stored heap style: node 1 is the root and node v has children
2v and 2v+1. Node v covers a range [l, r) of the points and holds
(x - points[l]) * ... * (x - points[r-1]). Reducing a polynomial modulo
the two children's products and recursing leaves, at every leaf, a
constant equal to the polynomial's value at that point.
"""

import logging

from .polynomial import Polynomial

logger = logging.getLogger(__name__)


class ProductTree(object):

    def __init__(self, points, cls=Polynomial):
        self.points = list(points)
        n = len(self.points)
        self.nodes = [None] * (4 * n)
        self.ranges = [None] * (4 * n)
        if n:
            self._build(cls, 1, 0, n)
        logger.debug("Built product tree over %d points", n)

    def _build(self, cls, v, l, r):
        self.ranges[v] = (l, r)
        if l + 1 == r:
            self.nodes[v] = cls([-self.points[l], 1])
        else:
            m = (l + r) // 2
            self.nodes[v] = self._build(cls, 2*v, l, m) * \
                self._build(cls, 2*v+1, m, r)
        return self.nodes[v]

    def __getitem__(self, v):
        return self.nodes[v]

    def __len__(self):
        return len(self.points)

    # The product of all linear factors, or None for an empty tree
    @property
    def root(self):
        return self.nodes[1] if self.points else None

    def is_leaf(self, v):
        l, r = self.ranges[v]
        return l + 1 == r


# poly mod modulus, where a poly that is already smaller is its own remainder
def _reduce(poly, modulus):
    if poly.deg() < modulus.deg():
        return poly
    return poly % modulus


def _evaluate(poly, tree, v):
    if tree.is_leaf(v):
        l, _ = tree.ranges[v]
        return [poly.evaluate(tree.points[l])]
    left, right = 2*v, 2*v+1
    return _evaluate(_reduce(poly, tree[left]), tree, left) + \
        _evaluate(_reduce(poly, tree[right]), tree, right)


def multi_point_evaluation(poly, points):
    """
    Evaluates poly at every point in O(n log(n)^2), returning the values in
    the order of the points.
    """
    tree = ProductTree(points, type(poly))
    if not len(tree):
        return []
    return _evaluate(poly, tree, 1)
