"""Class discovery from a classpath root."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from singleton_detector.domain.ports.classpath_root import ClasspathRootPort

logger = logging.getLogger(__name__)

CLASS_SUFFIX = ".class"

# Compiler-generated and inner classes carry this in their binary name
NESTED_CLASS_MARKER = "$"

# Root supertype of every enum, never worth analyzing
EXCLUDED_CLASSES = frozenset({"java.lang.Enum"})


def class_name_for(prefix: str, resource: str) -> str:
    """Convert a class resource under prefix to a dotted class name.

    Only the trailing class-file suffix is removed.

    Example:
        >>> class_name_for("com/example/", "Foo.class")
        'com.example.Foo'
    """
    path = prefix + resource
    if path.endswith(CLASS_SUFFIX):
        path = path[: -len(CLASS_SUFFIX)]
    return path.replace("/", ".")


def resource_for(class_name: str) -> str:
    """Convert a dotted class name back to its resource path.

    Example:
        >>> resource_for("com.example.Foo")
        'com/example/Foo.class'
    """
    return class_name.replace(".", "/") + CLASS_SUFFIX


def is_class_path(prefix: str, resource: str) -> bool:
    """Check that a class resource sits at a well-formed package path.

    Every directory segment and the class stem must be an identifier.
    Rejects module-info.class, package-info.class and class files under
    directories such as META-INF or v1.2, which cannot be turned back
    into a resource path from their dotted name.

    Example:
        >>> is_class_path("com/example/", "Foo.class")
        True
        >>> is_class_path("v1.2/", "Foo.class")
        False
    """
    if not resource.endswith(CLASS_SUFFIX):
        return False
    path = prefix + resource[: -len(CLASS_SUFFIX)]
    return all(segment.isidentifier() for segment in path.split("/"))


def is_reportable(class_name: str) -> bool:
    """Check that a class is a dotted identifier, neither nested nor excluded."""
    return (
        NESTED_CLASS_MARKER not in class_name
        and class_name not in EXCLUDED_CLASSES
        and all(part.isidentifier() for part in class_name.split("."))
    )


def enumerate_classes(
    root: ClasspathRootPort,
    prefix: str = "",
    on_found: Callable[[str], None] | None = None,
) -> frozenset[str]:
    """Discover every class under prefix.

    Recursively lists resources: class files become class names,
    everything else is descended into as a sub-package.

    Args:
        root: Classpath root to walk
        prefix: Slash-terminated package path, "" for the root package
        on_found: Called with each accepted class name when it is found

    Returns:
        Frozenset of fully qualified class names

    Raises:
        ValueError: If prefix is not empty and not slash-terminated
        ResourceAccessError: If any listing fails (no partial result)

    Example:
        >>> enumerate_classes(DirectoryClasspathRoot(Path("build/classes")), "com/example/")
        frozenset({'com.example.Foo', 'com.example.util.Bar', ...})
    """
    if prefix and not prefix.endswith("/"):
        raise ValueError(f"prefix must end with '/', got {prefix!r}")

    classes: set[str] = set()
    _walk(root, prefix, classes, on_found)
    logger.debug("Found %d classes under %r in %r", len(classes), prefix, root)
    return frozenset(classes)


def _walk(
    root: ClasspathRootPort,
    prefix: str,
    classes: set[str],
    on_found: Callable[[str], None] | None,
) -> None:
    for resource in root.list_resources(prefix):
        if resource.endswith(CLASS_SUFFIX):
            if not is_class_path(prefix, resource):
                logger.debug("Skipping %s%s: not a class name", prefix, resource)
                continue
            class_name = class_name_for(prefix, resource)
            if is_reportable(class_name) and class_name not in classes:
                classes.add(class_name)
                if on_found is not None:
                    on_found(class_name)
        else:
            _walk(root, f"{prefix}{resource}/", classes, on_found)
