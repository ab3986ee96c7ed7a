import re
from pathlib import Path

from setuptools import find_namespace_packages, setup

_init = Path(__file__).parent.joinpath("lambdas", "__init__.py").read_text()
__version__ = re.search(r'^VERSION = "([^"]+)"', _init, re.M).group(1)
VERSION = __version__

setup(
    name="lambdas",
    version=VERSION,
    packages=find_namespace_packages(include=["lambdas", "lambdas.*"]),
    python_requires=">=3.9",
    install_requires=["typing_extensions>=4.0"],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lambdas=lambdas.__main__:main"],
    },
)
