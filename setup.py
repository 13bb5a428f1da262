from setuptools import setup, find_packages

setup(
    name="bm_search",
    version="0.1.0",
    description="Boyer-Moore exact substring search with bad-character and good-suffix heuristics",
    packages=find_packages(include=["bmsearch", "bmsearch.*"]),
    package_data={"bmsearch.config": ["search.conf"]},
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.50",
            "pandas>=1.5",
            "matplotlib>=3.5",
        ],
        "benchmark": [
            "pandas>=1.5",
            "matplotlib>=3.5",
        ],
    },
    entry_points={
        "console_scripts": [
            "bm-search=bmsearch.cli:main",
        ],
    },
)
