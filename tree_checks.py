# Structural checks for an OrderedTree: search order, sorted iteration
# and parent links.

from ordered_tree import Node, OrderedTree


def verify_bst(tree: OrderedTree):
    """Left subtrees hold smaller values, right subtrees equal or larger ones."""
    if tree.root is None:
        return True

    # explicit stack of (node, lower bound inclusive, upper bound exclusive)
    stack = [(tree.root, None, None)]
    while stack:
        node, t_min, t_max = stack.pop()
        if t_min is not None and node.value < t_min:
            return False
        if t_max is not None and not node.value < t_max:
            return False

        if node.left is not None:
            stack.append((node.left, t_min, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, t_max))

    return True


def verify_is_sorted(values):
    last_value = None
    first = True
    for value in values:
        if first:
            first = False
        elif value < last_value:
            return False
        last_value = value

    return True


def verify_parent_links(tree: OrderedTree):
    root = tree.root
    if root is None:
        return True
    if root.parent is not None:
        return False

    stack = [root]
    while stack:
        node: Node = stack.pop()
        for child in (node.left, node.right):
            if child is None:
                continue
            if child.parent is not node:
                return False
            stack.append(child)

    return True
