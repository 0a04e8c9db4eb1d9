"""Sorting strategies: fixed sequences for small stacks, cost-driven insertion for the rest."""

from __future__ import annotations

from collections.abc import Callable

from pushswap.stack import Board, Node, is_desc_sorted, is_sorted
from pushswap.structuring import (
    establish_cost,
    index_stack,
    init_all,
    init_not_all,
    mark_limits,
    max_node,
    min_node,
    reset_a,
)

FINAL_SORT_THRESHOLD = 15


def _repeat(move: Callable[[], bool], times: int) -> None:
    for _ in range(times):
        move()


def _bring_to_top_of_a(board: Board, node: Node) -> None:
    if node.cost < 0:
        _repeat(board.rra, -node.cost)
    else:
        _repeat(board.ra, node.cost)


def _bring_to_top_of_b(board: Board, node: Node) -> None:
    if node.cost < 0:
        _repeat(board.rrb, -node.cost)
    else:
        _repeat(board.rb, node.cost)


def sort_three(board: Board) -> None:
    """Sort the top three nodes of a with at most three instructions."""
    if len(board.a) < 3:
        raise ValueError("stack a needs at least three numbers")
    first, second, third = (node.value for node in board.a[:3])
    if first > second and first > third:
        board.ra()
        if second > third:
            board.sa()
        return
    if second < first < third:
        board.sa()
        return
    if third < first < second:
        board.rra()
        return
    if first < second < third:
        return
    if first > second:
        board.sa()
    elif first < third:
        board.ra()
        board.sa()
        board.rra()


def sort_four(board: Board) -> None:
    """Push the minimum of a to b, sort the other three, push it back."""
    index_stack(board.a)
    establish_cost(board.a)
    mark_limits(board.a)
    _bring_to_top_of_a(board, min_node(board.a))
    board.pb()
    sort_three(board)
    board.pa()


def sort_five(board: Board) -> None:
    """Push the two smallest of a to b, sort the rest, push them back."""
    for _ in range(2):
        init_all(board)
        _bring_to_top_of_a(board, min_node(board.a))
        board.pb()
    sort_three(board)
    board.pa()
    board.pa()


def sort_tail(board: Board, count: int) -> None:
    """Push the ``count`` smallest of a to b, sort a's last three, push them back."""
    for _ in range(count):
        init_all(board)
        _bring_to_top_of_a(board, min_node(board.a))
        board.pb()
    sort_three(board)
    _repeat(board.pa, count)


def execute_lowcost(board: Board, node: Node) -> None:
    """Rotate ``node`` of a and its target in b to the tops, then push it to b."""
    target = node.target_node
    if target is None:
        raise ValueError("node has no target in stack b")
    cost, target_cost = node.cost, target.cost
    if cost >= 0 and target_cost >= 0:
        if cost >= target_cost:
            _repeat(board.ra, cost - target_cost)
            _repeat(board.rr, target_cost)
        else:
            _repeat(board.rb, target_cost - cost)
            _repeat(board.rr, cost)
    elif cost >= 0:
        _repeat(board.rrb, -target_cost)
        _repeat(board.ra, cost)
    elif target_cost < 0:
        if cost <= target_cost:
            _repeat(board.rra, target_cost - cost)
            _repeat(board.rrr, -target_cost)
        else:
            _repeat(board.rrb, cost - target_cost)
            _repeat(board.rrr, -cost)
    else:
        _repeat(board.rb, target_cost)
        _repeat(board.rra, -cost)
    board.pb()


def sort_step(board: Board) -> None:
    """Move the node of a marked as cheapest onto b."""
    if not board.a or not board.b:
        return
    chosen = next((node for node in board.a if node.is_lowcost), None)
    if chosen is not None:
        execute_lowcost(board, chosen)


def _final_sort(board: Board, size: int) -> None:
    sort_tail(board, size - 3)
    init_not_all(board)
    _bring_to_top_of_b(board, max_node(board.b))
    lowest_of_a = min_node(board.a)
    while (
        board.a[-1].value > board.b[0].value
        and not lowest_of_a.value > board.b[0].value
    ):
        board.rra()
    while board.b:
        last = board.a[-1]
        if board.b[0].value < last.value < board.a[0].value:
            board.rra()
        else:
            board.pa()
    while board.a[0].value > board.a[-1].value:
        board.rra()


def run_algorithm(board: Board) -> None:
    """Sort a of any size by cheapest insertions into b, then merge back."""
    board.pb()
    board.pb()
    if (
        len(board.b) >= 2
        and not is_desc_sorted(board.b)
        and board.b[0].value < board.b[1].value
    ):
        board.sb()
    while not is_sorted(board.a) or board.b:
        init_all(board)
        if len(board.a) <= FINAL_SORT_THRESHOLD and board.b:
            _final_sort(board, len(board.a))
            return
        sort_step(board)
        if not board.a:
            reset_a(board)
            return


def sort_stack(board: Board) -> None:
    """Sort a, choosing the strategy by its size."""
    size = len(board.a)
    if size < 2:
        return
    if size == 2:
        if board.a[0].value > board.a[1].value:
            board.sa()
    elif size == 3:
        sort_three(board)
    elif size == 4:
        sort_four(board)
    elif size == 5:
        sort_five(board)
    else:
        run_algorithm(board)