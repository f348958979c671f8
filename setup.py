"""Compatibility setup.py for older setuptools/pip editable installs."""

from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup

ROOT = Path(__file__).resolve().parent
README = (ROOT / "README.md").read_text(encoding="utf-8")

about: dict[str, str] = {}
exec((ROOT / "editrank" / "__init__.py").read_text(encoding="utf-8"), about)

setup(
    name="editrank",
    version=about["__version__"],
    description="Rank lines by Levenshtein edit distance to a query",
    long_description=README,
    long_description_content_type="text/markdown",
    python_requires=">=3.9",
    packages=find_packages(include=["editrank", "editrank.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "rapidfuzz>=3.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "editrank=editrank.cli:main",
        ]
    },
)
