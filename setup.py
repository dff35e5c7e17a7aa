# setup.py
from setuptools import setup, find_packages

setup(
    name="rcalc",
    version="0.1.0",
    description="Evaluator for rational complex arithmetic expressions",
    python_requires=">=3.10",
    packages=find_packages(include=["rcalc", "rcalc.*", "rcalc_lsp", "rcalc_lsp.*"]),
    install_requires=[
        "pygls>=1.0,<2.0",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "rcalc=rcalc.cli:main",
            "rcalc-ls=rcalc_lsp.server:main",
        ],
    },
    zip_safe=False,
)
