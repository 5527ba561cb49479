import re

# Root package of the Scala standard library, kept whole by default
DEFAULT_PACKAGE_PREFIX = "scala"

KEEP_RULE_TEMPLATE = "-keep public class {} {{*;}}"

####################
# Dex container layout
####################
DEX_MAGIC = b"dex\n"
DEX_HEADER_SIZE = 0x70

# classes.dex, classes2.dex, classes3.dex, ... in an APK/JAR
MULTIDEX_ENTRY_PATTERN = re.compile(r"^classes(\d*)\.dex$")

PROGUARD_VERSION_PATTERN = re.compile(r"ProGuard,? version ([0-9][0-9A-Za-z.\-]*)")
