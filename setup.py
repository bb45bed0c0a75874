from setuptools import setup, find_packages

setup(
    name="kenken",
    version="1.0.0",
    description="KenKen Puzzle Solver with MRV Backtracking Search",
    author="robomotic",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"kenken.examples": ["*.json"]},
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "kenken=kenken.cli:main",
        ],
    },
)
