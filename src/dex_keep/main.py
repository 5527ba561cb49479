"""
Main entry point for the dex-keep tool.
"""
import os

from androguard.util import set_log

#   core imports

from dex_keep.core.class_extractor import ClassExtractor, isReadableFile
from dex_keep.core.dex_container import CorruptContainerError
from dex_keep.core.keep_rules import KeepRuleGenerator
from dex_keep.core.proguard_tool import ProGuardTool, ProGuardError

#   utility imports

from dex_keep.utils.cli_tools import parseArgs, abort, verbosePrint, dbgPrint, warningPrint
from dex_keep.utils.dependencies import checkDependencies


def main(argv=None):
    # Grab argz
    args = parseArgs(argv)
    proguard = args.proguard or ProGuardTool.defaultExecutable()

    # androguard logs every parsed item at DEBUG
    if not args.debug_output:
        set_log("ERROR")

    # Check that dependencies are available
    checkDependencies(args.run_proguard, proguard)

    # A clean build has no dex yet, which just means there is nothing to keep
    if not isReadableFile(args.container):
        warningPrint(f"[!] No dex found at {args.container}, nothing to keep.")

    # Collect the classes of the requested package
    try:
        classes = ClassExtractor.extract(args.container, args.package_prefix)
    except CorruptContainerError as e:
        abort(str(e))
    except ValueError as e:
        abort(f"Error: {e}")
    verbosePrint(f"[+] Found {len(classes)} classes under '{args.package_prefix}' in {args.container}")

    rules = KeepRuleGenerator.generateRules(classes)
    for rule in rules:
        dbgPrint("[~] " + rule)

    if args.output is not None:
        print("[+] Writing " + str(len(rules)) + " keep rules to " + args.output)
        KeepRuleGenerator.writeRulesFile(rules, args.output)

    if not args.run_proguard:
        if args.output is None:
            for rule in rules:
                print(rule)
        return 0

    # Warn for unexpected version
    try:
        proguardVersion = ProGuardTool.getProGuardVersion(proguard)
        print(f"Using ProGuard v{proguardVersion}")
    except ProGuardError as e:
        warningPrint(f"[!] {e}")

    # Run ProGuard with the keep rules appended to the caller's arguments
    params = ProGuardTool.buildArguments(args.proguard_args, rules)
    print("[+] Running " + os.path.basename(proguard) + " with " + str(len(rules)) + " keep rules.")
    result = ProGuardTool.runProGuard(params, proguard)
    dbgPrint(result["stdout"])
    dbgPrint(result["stderr"])
    if not result["ok"]:
        abort("Error: Failed to run '" + proguard + "'.\nRun with --debug-output for more information.")

    # Done
    print("[+] Done")
    return 0


if __name__ == '__main__':
    main()
