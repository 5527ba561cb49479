"""Core package for dex class extraction and keep rule generation."""

from .class_extractor import ClassExtractor
from .dex_container import DexContainer, CorruptContainerError
from .keep_rules import KeepRuleGenerator
from .proguard_tool import ProGuardTool, ProGuardError

__all__ = [
    "ClassExtractor",
    "DexContainer",
    "CorruptContainerError",
    "KeepRuleGenerator",
    "ProGuardTool",
    "ProGuardError",
]
