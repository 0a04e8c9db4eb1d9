"""Marks computed on the stacks before each move: positions, costs, targets."""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.stack import Board, Node


def index_stack(nodes: Sequence[Node]) -> None:
    """Number the nodes from 1 at the top."""
    for position, node in enumerate(nodes, 1):
        node.index = position


def establish_cost(nodes: Sequence[Node]) -> None:
    """Set each node's rotation cost to reach the top.

    Nodes in the upper half get a positive count of rotations, nodes in the
    lower half a negative count of reverse rotations. On an even-sized stack
    the node two places below the median is marked ``is_mid``.
    """
    size = len(nodes)
    if size == 0:
        return
    if size == 1:
        nodes[0].cost = 0
        return
    upper = (size + 1) // 2
    for position, node in enumerate(nodes, 1):
        if position <= upper:
            node.cost = position - 1
        else:
            node.cost = position - size - 1
    if size % 2 == 0 and size // 2 + 1 < size:
        nodes[size // 2 + 1].is_mid = True


def mark_limits(nodes: Sequence[Node]) -> None:
    """Clear the min, max and low-cost marks, then mark the first min and max."""
    if not nodes:
        return
    for node in nodes:
        node.is_min = False
        node.is_max = False
        node.is_lowcost = False
    lowest = highest = nodes[0]
    for node in nodes:
        if node.value < lowest.value:
            lowest = node
        if node.value > highest.value:
            highest = node
    lowest.is_min = True
    highest.is_max = True


def mark_lowcost(nodes: Sequence[Node]) -> None:
    """Mark the first node whose absolute ``cost_to_swap`` is the smallest."""
    if not nodes:
        return
    chosen = min(nodes, key=lambda node: abs(node.cost_to_swap))
    chosen.is_lowcost = True


def _last_marked(nodes: Sequence[Node], attribute: str) -> Node:
    marked = [node for node in nodes if getattr(node, attribute)]
    if not marked:
        raise ValueError(f"no node carries the {attribute} mark")
    return marked[-1]


def max_node(nodes: Sequence[Node]) -> Node:
    """The node marked as maximum by ``mark_limits``."""
    return _last_marked(nodes, "is_max")


def min_node(nodes: Sequence[Node]) -> Node:
    """The node marked as minimum by ``mark_limits``."""
    return _last_marked(nodes, "is_min")


def _target_between(current: Node, stack_b: Sequence[Node]) -> None:
    last = stack_b[-1]
    position = 0
    while position + 1 < len(stack_b):
        here = stack_b[position]
        below = stack_b[position + 1]
        if here.value > current.value > below.value:
            current.target_node = below
            return
        if here.value < current.value < last.value:
            current.target_node = here
            return
        position += 1
    tail = stack_b[position]
    if current.value < tail.value and tail.is_min and current.target_node is None:
        current.target_node = stack_b[0]


def find_target_node(stack_a: Sequence[Node], stack_b: Sequence[Node]) -> None:
    """For each node of a, pick the node of b it should land above."""
    if not stack_a or not stack_b:
        return
    for current in stack_a:
        highest = max_node(stack_b)
        lowest = min_node(stack_b)
        if current.value > highest.value or current.value < lowest.value:
            current.target_node = highest
        else:
            _target_between(current, stack_b)


def establish_cost_to_swap(nodes: Sequence[Node]) -> None:
    """Combine each node's cost with its target's cost.

    Stops at the first node that has no target.
    """
    for node in nodes:
        target = node.target_node
        if target is None:
            return
        cost, target_cost = node.cost, target.cost
        if cost >= 0 and target_cost >= 0:
            node.cost_to_swap = (cost if cost >= target_cost else target_cost) + 1
        elif cost < 0 and target_cost < 0:
            node.cost_to_swap = cost + 1 if cost <= target_cost else -target_cost + 1
        elif cost >= 0:
            node.cost_to_swap = cost - target_cost + 1
        else:
            node.cost_to_swap = -cost + target_cost + 1


def init_not_all(board: Board) -> None:
    """Index, mark limits and cost both stacks."""
    for stack in (board.a, board.b):
        index_stack(stack)
    for stack in (board.a, board.b):
        mark_limits(stack)
    for stack in (board.a, board.b):
        establish_cost(stack)


def init_all(board: Board) -> None:
    """Prepare both stacks and mark the cheapest node of a to move."""
    init_not_all(board)
    find_target_node(board.a, board.b)
    establish_cost_to_swap(board.a)
    mark_lowcost(board.a)


def reset_a(board: Board) -> None:
    """Bring the maximum of b to its top, then push all of b onto a."""
    index_stack(board.b)
    establish_cost(board.b)
    mark_limits(board.b)
    highest = max_node(board.b)
    if highest.cost < 0:
        for _ in range(-highest.cost):
            board.rrb()
    else:
        for _ in range(highest.cost):
            board.rb()
    while board.b:
        board.pa()