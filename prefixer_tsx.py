# prefixer_tsx.py – Tree-sitter rewriter for className / cn() / cva() strings

from typing import Dict, List, Optional

from tree_sitter import Language, Node, Parser
from tree_sitter_language_pack import get_language

from prefixer_base import Edit, ParseFailure, apply_edits, quote_string, string_value
from prefixer_classes import prefix_classes
from prefixer_context import is_conditional_context

# --------------------------------------------------------------------------- #
#  Grammars are loaded once per process; parsers are built per call
# --------------------------------------------------------------------------- #
DIALECTS = ("tsx", "typescript", "javascript")
_LANGUAGES: Dict[str, Language] = {}


def _language(name: str) -> Language:
    if name not in DIALECTS:
        raise ValueError(f"Unsupported dialect {name!r}")
    if name not in _LANGUAGES:
        _LANGUAGES[name] = get_language(name)
    return _LANGUAGES[name]


def parse(source: bytes, language: str = "tsx") -> Node:
    """Parse *source* and return the root node, or raise ParseFailure."""
    tree = Parser(_language(language)).parse(source)
    root = tree.root_node
    if root.has_error:
        bad = _first_error(root) or root
        row, col = bad.start_point
        kind = "missing " + bad.type if bad.is_missing else bad.type
        raise ParseFailure(row + 1, col + 1, kind)
    return root


def _first_error(node: Node) -> Optional[Node]:
    stack = [node]
    while stack:
        n = stack.pop()
        if n.type == "ERROR" or n.is_missing:
            return n
        if n.has_error:
            stack.extend(reversed(n.children))
    return None


# --------------------------------------------------------------------------- #
#  Shape helpers
# --------------------------------------------------------------------------- #
CLASS_FUNCTIONS = {b"cn", b"cva"}
SKIPPED_KEYS = {b"defaultVariants", b"compoundVariants"}


def _key_name(pair: Node) -> bytes:
    key = pair.child_by_field_name("key")
    if key is not None and key.type == "property_identifier":
        return key.text
    return b""


def is_class_name_property(node: Node) -> bool:
    return node.type == "pair" and _key_name(node) == b"className"


def is_class_function_call(node: Node) -> bool:
    if node.type != "call_expression":
        return False
    fn = node.child_by_field_name("function")
    args = node.child_by_field_name("arguments")
    return (
        fn is not None
        and fn.type == "identifier"
        and fn.text in CLASS_FUNCTIONS
        and args is not None
        and args.type == "arguments"
    )


def _pairs(obj: Node):
    return [c for c in obj.named_children if c.type == "pair"]


def _expression(node: Node) -> Optional[Node]:
    # parenthesized_expression wraps one expression, possibly next to comments
    for c in node.named_children:
        if c.type != "comment":
            return c
    return None


# --------------------------------------------------------------------------- #
#  Visitor
# --------------------------------------------------------------------------- #
class TsxRewriter:
    """Collects literal replacements for one parsed file.

    Nodes are never modified; each rewrite is an Edit over the literal's byte
    span, applied afterwards by ``apply_edits``.
    """

    def __init__(self, source: bytes, prefix: str):
        self.source = source
        self.prefix = prefix
        self.edits: List[Edit] = []

    # ------------------------------------------------ entry
    def visit(self, root: Node) -> List[Edit]:
        stack = [root]
        while stack:
            node = stack.pop()
            if self._visit_shape(node):
                continue
            stack.extend(reversed(node.children))
        return self.edits

    def _visit_shape(self, node: Node) -> bool:
        """Handle a recognised shape; True means its subtree is done."""
        if is_class_name_property(node):
            value = node.child_by_field_name("value")
            if value is not None and value.type == "string":
                self.prefix_literal(value)
                return True
            return False
        if is_class_function_call(node):
            for arg in node.child_by_field_name("arguments").named_children:
                self.visit_class_value(arg)
            return True
        return False

    # ------------------------------------------------ literals
    def prefix_literal(self, literal: Node):
        raw = self.source[literal.start_byte : literal.end_byte].decode("utf8")
        new = quote_string(prefix_classes(string_value(raw), self.prefix), raw[0])
        if new != raw:
            self.edits.append(Edit(literal.start_byte, literal.end_byte, new))

    # ------------------------------------------------ cn / cva arguments
    def visit_class_value(self, node: Node):
        kind = node.type
        if kind == "string":
            if not is_conditional_context(node):
                self.prefix_literal(node)
        elif kind == "object":
            self.visit_object(node)
        elif kind == "ternary_expression":
            self.visit_conditional(node)
        elif kind == "binary_expression":
            if node.child_by_field_name("operator").type == "&&":
                self.visit_class_value(node.child_by_field_name("left"))
                self.visit_class_value(node.child_by_field_name("right"))
        elif kind == "parenthesized_expression":
            inner = _expression(node)
            if inner is not None:
                self.visit_class_value(inner)
        # identifiers, member access, calls, templates, || and ??: left alone

    def visit_conditional(self, node: Node):
        # the condition is a predicate and is never visited; literal branches
        # are rendered output wherever the ternary itself sits
        for field in ("consequence", "alternative"):
            branch = node.child_by_field_name(field)
            if branch is None:
                continue
            if branch.type == "string":
                self.prefix_literal(branch)
            else:
                self.visit_class_value(branch)

    def visit_object(self, obj: Node, variant_definition: bool = False):
        for pair in _pairs(obj):
            name = _key_name(pair)
            value = pair.child_by_field_name("value")
            if value is None or name in SKIPPED_KEYS:
                continue
            if name == b"variants" and value.type == "object":
                self.visit_object(value, True)
            elif variant_definition and value.type == "object":
                # option map: { sm: "text-sm", lg: "text-lg" }
                for option in _pairs(value):
                    option_value = option.child_by_field_name("value")
                    if option_value is not None and option_value.type == "string":
                        self.prefix_literal(option_value)
            elif value.type == "string":
                self.prefix_literal(value)
            elif value.type == "object":
                self.visit_object(value)


# --------------------------------------------------------------------------- #
#  Public API
# --------------------------------------------------------------------------- #
def prefix_tailwind_classes(source: str, prefix: str, language: str = "tsx") -> str:
    """Return *source* with class strings in className/cn()/cva() prefixed.

    Text outside rewritten literals is returned byte-for-byte. Raises
    ParseFailure when *source* does not parse.
    """
    source_bytes = source.encode("utf8")
    root = parse(source_bytes, language)
    edits = TsxRewriter(source_bytes, prefix).visit(root)
    if not edits:
        return source
    return apply_edits(source_bytes, edits).decode("utf8")
