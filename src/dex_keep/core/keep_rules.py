"""
Keep rule generation for ProGuard.
"""
import os

from dex_keep.config.constants import KEEP_RULE_TEMPLATE


class KeepRuleGenerator:
    """Maps class names to ProGuard keep rules, one rule per class."""

    @staticmethod
    def formatRule(className):
        # The rule always says "public", whatever the class's real visibility
        return KEEP_RULE_TEMPLATE.format(className)

    @staticmethod
    def generateRules(classSet):
        # Sorted so that the same classes always give the same command line
        return [KeepRuleGenerator.formatRule(name) for name in sorted(set(classSet))]

    @staticmethod
    def writeRulesFile(rules, path):
        """Write rules one per line, ready to be passed to ProGuard with -include."""
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding="utf-8") as fh:
            fh.write("# Generated by dex-keep, do not edit.\n")
            for rule in rules:
                fh.write(rule + "\n")
        return path
