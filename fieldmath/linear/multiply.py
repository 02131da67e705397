#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""
Divide and conquer matrix multiplication.

The columns of the product are computed in ranges. A range of at least
`threshold` columns is bisected at its midpoint, smaller ranges are leaves
computed as one task. All leaves are forked onto the shared pool before
any of them is joined; the halves are then concatenated left before right,
so the result never depends on completion order.
"""

from concurrent.futures import Future
import logging
from typing import Callable, List, Optional, Sequence, Tuple, Union

from ..exceptions import check_dimension
from ..names import THRESHOLD
from ..pool import ForkJoinPool, get_config, shared_pool
from .vector import Vector

LOG = logging.getLogger(__name__)

# A node of the task tree: a leaf future or a (left, right) pair
_Node = Union[Future, Tuple['_Node', '_Node']]


def multiply(left, right, make_column: Callable[[list], Vector], threshold: Optional[int] = None,
             pool: Optional[ForkJoinPool] = None) -> List[Vector]:
    """
    Columns of the product left * right.

    Args:
        left: m x n matrix
        right: n x p matrix
        make_column: Builds a result column from its m elements
        threshold: Smallest column range that is split, the configured
            threshold by default
        pool: Pool to fork onto, the shared pool by default

    Returns:
        The p columns of the product in index order

    Raises:
        DimensionError: If left has not as many columns as right has rows
        Exception: The first failure of a leaf, in column order, after all
            leaves have finished
    """
    check_dimension(left.get_column_count(), right.get_row_count(), "inner dimension")
    if threshold is None:
        threshold = get_config()[THRESHOLD]
    if threshold < 2:
        raise ValueError(f"threshold must be an integer >= 2, got {threshold}")
    rows = [left.get_row(i) for i in range(left.get_row_count())]
    p = right.get_column_count()
    if p < threshold:
        return _compute_columns(rows, right, 0, p, make_column)
    holder = shared_pool() if pool is None else pool.running()
    with holder as workers:
        tree = _fork(workers, rows, right, 0, p, threshold, make_column)
        leaves = list(_leaves(tree))
        LOG.debug("Multiplying %dx%d by %dx%d in %d tasks.", len(rows), left.get_column_count(),
                  right.get_row_count(), p, len(leaves))
        # waits for every leaf, then raises the first failure in column order
        workers.join(leaves)
    return _join(tree)


def _fork(pool: ForkJoinPool, rows: Sequence[Vector], right, start: int, end: int, threshold: int,
          make_column: Callable) -> _Node:
    if end - start < threshold:
        return pool.fork(_compute_columns, rows, right, start, end, make_column)
    middle = (start + end) >> 1
    return (_fork(pool, rows, right, start, middle, threshold, make_column),
            _fork(pool, rows, right, middle, end, threshold, make_column))


def _leaves(node: _Node):
    if isinstance(node, Future):
        yield node
    else:
        for child in node:
            yield from _leaves(child)


def _join(node: _Node) -> List[Vector]:
    if isinstance(node, Future):
        return node.result()
    first, second = node
    return _join(first) + _join(second)


def _compute_columns(rows: Sequence[Vector], right, start: int, end: int, make_column: Callable) -> List[Vector]:
    columns = []
    for j in range(start, end):
        column = right.get_column(j)
        columns.append(make_column([row.times(column) for row in rows]))
    return columns
