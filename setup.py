# setup.py
from setuptools import setup, find_packages

setup(
    name="funclang",
    version="0.1.0",
    description="FuncLang: a small functional Lisp with concrete and sign/boolean abstract evaluation",
    packages=find_packages(include=["funclang", "funclang.*", "funclang_lsp", "funclang_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "funclang=funclang.cli:main",
            "funclang-ls=funclang_lsp.server:main",
        ],
    },
    zip_safe=False,
)
