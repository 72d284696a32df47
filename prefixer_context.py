# prefixer_context.py – ancestor walk deciding whether a string is a guard

from enum import Enum
from typing import Any, Callable, Optional

COMPARISON_OPERATORS = frozenset({"==", "===", "!=", "!==", "<", ">", "<=", ">="})


class Context(Enum):
    ELIGIBLE = "eligible"  # rendered as a class list
    GUARDED = "guarded"  # ternary condition / left side of &&
    DISCRIMINANT = "discriminant"  # operand of a comparison


def _parent(node: Any) -> Optional[Any]:
    return node.parent


def classify_context(
    node: Any, parent_of: Callable[[Any], Optional[Any]] = _parent
) -> Context:
    """Classify how the expression *node* is used by its ancestors.

    Walks up to the root; the first disqualifying ancestor decides. Nodes only
    need ``type`` and ``child_by_field_name`` (tree-sitter's API), so the walk
    runs on synthetic trees as well as parsed ones.
    """
    child, parent = node, parent_of(node)
    while parent is not None:
        if parent.type == "ternary_expression":
            if parent.child_by_field_name("condition") == child:
                return Context.GUARDED
        elif parent.type == "binary_expression":
            op = parent.child_by_field_name("operator").type
            if op in COMPARISON_OPERATORS:
                return Context.DISCRIMINANT
            if op == "&&" and parent.child_by_field_name("left") == child:
                return Context.GUARDED
        child, parent = parent, parent_of(parent)
    return Context.ELIGIBLE


def is_conditional_context(node: Any, parent_of=_parent) -> bool:
    return classify_context(node, parent_of) is not Context.ELIGIBLE
