# setup.py
from setuptools import setup, find_packages

setup(
    name="atto",
    version="0.3.0",
    description="Interpreter for Atto, a bracket-free prefix language resolved by arity",
    python_requires=">=3.10",
    packages=find_packages(include=["atto", "atto.*", "atto_lsp", "atto_lsp.*"]),
    package_data={"atto": ["prelude/*.at"]},
    install_requires=[],
    extras_require={
        "lsp": ["pygls>=1.1,<2", "lsprotocol"],
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "atto=atto.cli:main",
            "atto-ls=atto_lsp.server:main",
        ],
    },
    zip_safe=False,
)
