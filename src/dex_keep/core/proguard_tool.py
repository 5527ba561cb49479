''' ProGuard related functions '''

import subprocess
import os
from packaging.version import parse as parse_version, InvalidVersion

# config imports

from dex_keep.config.constants import PROGUARD_VERSION_PATTERN


class ProGuardError(RuntimeError): pass


class ProGuardTool:

    '''
    ProGuardTool class for handing keep rules to the shrinker.

    This class runs the ProGuard launcher script shipped in the ProGuard
    distribution's bin/ directory. The keep rules are appended to the
    caller's arguments as-is, one argv element per rule.

    Methods:
        defaultExecutable(): Name of the launcher for this platform.
        runProGuard(params, executable): Run ProGuard with the given parameters.
        getProGuardVersion(executable): Get the installed version of ProGuard.
        buildArguments(args, keepRules): Append keep rules to an argument list.

    Examples:
        >>> ProGuardTool.runProGuard(ProGuardTool.buildArguments(["@app.pro"], rules))
    '''

    @staticmethod
    def defaultExecutable():
        return "proguard.bat" if os.name == "nt" else "proguard"

    @staticmethod
    def runProGuard(params, executable=None):
        exe = executable or ProGuardTool.defaultExecutable()
        cp = subprocess.run(
            [exe, *params],
            text=True,
            capture_output=True,
            check=False,
        )
        return {
            "returncode": cp.returncode,
            "stdout": cp.stdout,
            "stderr": cp.stderr,
            "ok": (cp.returncode == 0),
        }

    @staticmethod
    def getProGuardVersion(executable=None):
        # ProGuard prints its banner even when run without arguments, and exits non-zero
        try:
            result = ProGuardTool.runProGuard([], executable)
        except OSError as e:
            raise ProGuardError(f"Error: Failed to run ProGuard: {e}") from e

        m = PROGUARD_VERSION_PATTERN.search(result["stdout"] + "\n" + result["stderr"])
        if m is None:
            raise ProGuardError("Error: Failed to get ProGuard version.")
        try:
            return parse_version(m.group(1).rstrip("."))
        except InvalidVersion as e:
            raise ProGuardError(f"Error: Unrecognised ProGuard version '{m.group(1)}'.") from e

    @staticmethod
    def buildArguments(args, keepRules):
        return list(args) + list(keepRules)
