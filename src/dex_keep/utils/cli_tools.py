"""
Command-line interface argument handling.
"""

import argparse
import sys
from termcolor import colored

from dex_keep.config.constants import DEFAULT_PACKAGE_PREFIX


def buildParser():
    parser = argparse.ArgumentParser(
        prog="dex-keep",
        usage="%(prog)s [options] container [-- proguard arguments...]",
        description="dex-keep - Generate ProGuard keep rules for every class of a package found in a dex file or APK."
    )
    parser.add_argument("container", help="Path to classes.dex, or to an APK/JAR containing classes*.dex. A missing file means there is nothing to keep.")
    parser.add_argument("-p", "--package-prefix", help="Package whose classes are kept (default: %(default)s).", default=DEFAULT_PACKAGE_PREFIX)
    parser.add_argument("-o", "--output", help="Write the keep rules to this file, for use with ProGuard's -include option.")
    parser.add_argument("--run-proguard", help="Run ProGuard with the arguments given after '--', followed by the keep rules.", action="store_true")
    parser.add_argument("--proguard", help="ProGuard executable to run (default: proguard, or proguard.bat on Windows).")
    parser.add_argument("--debug-output", help="Enable debug output.", action="store_true")
    parser.add_argument("-v", "--verbose", help="Enable verbose output.", action="store_true")
    return parser


def parseArgs(argv=None):
    argv = list(sys.argv[1:] if argv is None else argv)

    # Everything after the first "--" belongs to ProGuard
    proguardArgs = []
    if "--" in argv:
        split = argv.index("--")
        argv, proguardArgs = argv[:split], argv[split + 1:]

    args = buildParser().parse_args(argv)
    args.proguard_args = proguardArgs
    getArgs.parsed_args = args
    return args


def getArgs():
    # Only parse args once
    if not hasattr(getArgs, "parsed_args"):
        parseArgs()

    # Return the parsed command line args
    return getArgs.parsed_args


def abort(msg):
    print(colored(msg, "red"))
    sys.exit(1)


def verbosePrint(msg):
    if getArgs().verbose:
        for line in msg.split("\n"):
            print(colored("    " + line, "light_grey"))


def dbgPrint(msg):
    if getArgs().debug_output:
        print(msg)

####################
# Warning print
####################
def warningPrint(msg):
    print(colored(msg, "yellow"))
