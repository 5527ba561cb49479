"""dex-keep - generate ProGuard keep rules for the classes of a package found in a dex file."""

__version__ = "0.1.0"
