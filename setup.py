# setup.py
from setuptools import setup, find_packages

setup(
    name="drift",
    version="0.1.0",
    description="A small Lisp interpreter that compiles source straight to closures",
    packages=find_packages(include=["drift", "drift.*", "drift_lsp", "drift_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.0,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "drift=drift.__main__:main",
            "drift-ls=drift_lsp.server:main",
        ],
    },
    zip_safe=False,
)
