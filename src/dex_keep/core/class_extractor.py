"""
Selection of the classes of one package from a dex container.
"""
import os

# core imports

from .dex_container import DexContainer, CorruptContainerError

# config imports

from dex_keep.config.constants import DEFAULT_PACKAGE_PREFIX


def normalizeClassName(raw):
    # Accept both "scala/Predef" and the descriptor form "Lscala/Predef;"
    if raw.startswith("L") and raw.endswith(";"):
        raw = raw[1:-1]
    return raw.replace("/", ".")


def normalizePackagePrefix(prefix):
    prefix = prefix.strip().rstrip(".")
    if not prefix:
        raise ValueError("Package prefix must not be empty.")
    return prefix


def matchesPackagePrefix(className, prefix):
    # "scala" matches "scala" and "scala.Predef", never "scalax.Foo"
    return className == prefix or className.startswith(prefix + ".")


def isReadableFile(path):
    return os.path.isfile(path) and os.access(path, os.R_OK)


class ClassExtractor:
    """Extracts the fully-qualified names of the classes under a package prefix."""

    @staticmethod
    def extract(containerPath, packagePrefix=DEFAULT_PACKAGE_PREFIX):
        """
        Return a frozenset of dotted class names found in containerPath that
        belong to packagePrefix.

        A missing or unreadable container yields an empty set: the dex is
        simply not built yet. A container that exists but cannot be parsed
        raises CorruptContainerError.
        """
        prefix = normalizePackagePrefix(packagePrefix)

        if not isReadableFile(containerPath):
            return frozenset()

        with DexContainer(containerPath) as container:
            return frozenset(
                name
                for name in map(normalizeClassName, container.entries())
                if matchesPackagePrefix(name, prefix)
            )


__all__ = [
    "ClassExtractor",
    "CorruptContainerError",
    "normalizeClassName",
    "normalizePackagePrefix",
    "matchesPackagePrefix",
]
