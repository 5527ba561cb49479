import shutil
from dex_keep.utils.cli_tools import abort

def checkDependencies(run_proguard, proguard_executable):
    deps = []

    if run_proguard:
        deps += [proguard_executable]

    missing = []
    for dep in deps:
        if shutil.which(dep) is None:
            missing.append(dep)
    if len(missing) > 0:
        abort("Error, missing dependencies, ensure the following commands are available on the PATH: " + (", ".join(missing)))
