"""
Import resolution.

This module maps an import declaration to the name of the package it
depends on. Resolution is purely textual: no type information is used.
"""

from coupling_visualizer.models.import_reference import ImportReference

DEFAULT_PACKAGE = "default"


def resolve_target_package(reference: ImportReference) -> str:
    """Resolve the package an import declaration refers to.

    A regular import names a type, so its package is the qualifier of the
    name. A static import names a member of a type; the qualifier then still
    ends with the type name, which is stripped with a naming-convention
    heuristic (see ``leading_package_segments``).

    Args:
        reference: Import declaration to resolve.

    Returns:
        The resolved package name. ``"default"`` when the name has no
        qualifier; ``""`` when a static import has no lowercase-leading
        package segment.

    Example:
        >>> resolve_target_package(ImportReference("java.util.List"))
        'java.util'
        >>> resolve_target_package(
        ...     ImportReference("com.example.util.Helper.CONSTANT", is_static=True)
        ... )
        'com.example.util'
        >>> resolve_target_package(ImportReference("Helper.CONSTANT", is_static=True))
        ''
    """
    package = qualifier_of(reference.name)
    if reference.is_static:
        package = leading_package_segments(package)
    return package


def qualifier_of(name: str) -> str:
    """Return every segment of a dotted name except the last.

    Example:
        >>> qualifier_of("a.b.C")
        'a.b'
        >>> qualifier_of("C")
        'default'
    """
    qualifier, dot, _ = name.rpartition(".")
    if not dot:
        return DEFAULT_PACKAGE
    return qualifier


def leading_package_segments(name: str) -> str:
    """Keep the leading run of segments that start with a lowercase letter.

    Assumes lowercase package names and capitalized type names. Names that
    break the convention are truncated rather than rejected.

    Example:
        >>> leading_package_segments("com.example.Outer.Inner")
        'com.example'
        >>> leading_package_segments("Outer.inner")
        ''
    """
    segments: list[str] = []
    for segment in name.split("."):
        if not segment[:1].islower():
            break
        segments.append(segment)
    return ".".join(segments)
