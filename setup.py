from pathlib import Path
from setuptools import setup, find_packages
import re


HERE = Path(__file__).parent


def read_requirements(req_file: Path):
    lines = req_file.read_text(encoding="utf-8").splitlines()
    return [l.strip() for l in lines if l.strip() and not l.strip().startswith("#")]


def get_version(pkg_init: Path):
    m = re.search(r"__version__\s*=\s*['\"]([^'\"]+)['\"]", pkg_init.read_text(encoding="utf-8"))
    return m.group(1) if m else "0.0.0"


setup(
    name="dex-keep",
    version=get_version(HERE / "src" / "dex_keep" / "__init__.py"),
    description="Generate ProGuard keep rules for the classes of a package found in a dex file or APK",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=read_requirements(HERE / "requirements.txt"),
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "dex-keep=dex_keep.main:main",
        ]
    },
    python_requires=">=3.9",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
