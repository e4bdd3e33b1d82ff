# setup.py
from setuptools import setup, find_packages

setup(
    name="typelisp",
    version="0.1.0",
    description="A minimal Lisp read-eval-print interpreter with a language server",
    packages=find_packages(include=["typelisp", "typelisp.*", "typelisp_lsp", "typelisp_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "typelisp=typelisp.repl:main",
            "typelisp-ls=typelisp_lsp.server:main",
            "typelisp-repl-server=typelisp_lsp.repl_server:main",
        ],
    },
    zip_safe=False,
)
