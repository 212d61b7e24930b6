"""
Java source parser implementation.

This module defines the JavaSourceParser class, which uses tree-sitter's Java
grammar to extract the package declaration and import declarations of a
compilation unit.
"""

from typing import Optional

from tree_sitter import Node, Parser
from tree_sitter_language_pack import get_language

from coupling_visualizer.exceptions import SourceParseError
from coupling_visualizer.models.import_reference import ImportReference
from coupling_visualizer.models.source_facts import SourceFacts

NAME_NODE_TYPES = ("scoped_identifier", "identifier")


class JavaSourceParser:
    """Parser that turns Java source into package and import facts.

    Only top-level package and import declarations are inspected. A
    compilation unit with any syntax error is rejected as a whole.

    Example:
        >>> parser = JavaSourceParser()
        >>> facts = parser.parse(b"package a; import b.B; class A {}", "A.java")
        >>> facts.package
        'a'
        >>> [str(ref) for ref in facts.imports]
        ['import b.B']
    """

    def __init__(self) -> None:
        """Initialize a JavaSourceParser with the tree-sitter Java grammar."""
        self._parser = Parser(get_language("java"))

    def parse(self, source: bytes, path: str = "<source>") -> SourceFacts:
        """Parse Java source into SourceFacts.

        Args:
            source: Raw contents of the source file.
            path: Path used in error messages and copied into the result.

        Returns:
            SourceFacts holding the declared package (or None) and the
            imports in source order.

        Raises:
            SourceParseError: If the source contains syntax errors.
        """
        if isinstance(source, str):
            source = source.encode("utf-8")

        tree = self._parser.parse(source)
        root = tree.root_node
        if root.has_error:
            raise SourceParseError(
                "Java syntax error", path=path, line=_first_error_line(root)
            )

        package: Optional[str] = None
        imports: list[ImportReference] = []
        for node in root.named_children:
            if node.type == "package_declaration":
                package = _declared_name(node)
            elif node.type == "import_declaration":
                imports.append(_import_reference(node, path))

        return SourceFacts(path=path, package=package, imports=imports)

    def parse_file(self, path: str) -> SourceFacts:
        """Read and parse a source file.

        Raises:
            SourceParseError: If the file cannot be read or parsed.
        """
        try:
            with open(path, "rb") as fh:
                source = fh.read()
        except OSError as e:
            raise SourceParseError(f"Cannot read file: {e}", path=path) from e
        return self.parse(source, path)


def _node_text(node: Node) -> str:
    # Qualified names may be split over lines ("java\n    .util").
    return "".join(node.text.decode("utf-8", errors="replace").split())


def _declared_name(node: Node) -> Optional[str]:
    for child in node.named_children:
        if child.type in NAME_NODE_TYPES:
            return _node_text(child)
    return None


def _import_reference(node: Node, path: str) -> ImportReference:
    name: Optional[str] = None
    is_static = False
    is_wildcard = False
    for child in node.children:
        if child.type == "static":
            is_static = True
        elif child.type == "asterisk":
            is_wildcard = True
        elif child.type in NAME_NODE_TYPES:
            name = _node_text(child)
    if not name:
        raise SourceParseError(
            "Import declaration without a name",
            path=path,
            line=node.start_point[0] + 1,
        )
    return ImportReference(name=name, is_static=is_static, is_wildcard=is_wildcard)


def _first_error_line(root: Node) -> Optional[int]:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0] + 1
        stack.extend(reversed(node.children))
    return None
