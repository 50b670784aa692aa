from setuptools import setup, find_packages

setup(
    name="gridpath",
    version="0.1.0",
    packages=find_packages(include=["gridpath", "gridpath.*"]),
    install_requires=[
        "numpy",
        "pygame",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "gridpath=gridpath.__main__:main",
        ],
    },
    description="Interactive grid pathfinding visualizer",
    long_description="Paint walls on a grid and watch Dijkstra, breadth-first and depth-first search explore it.",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    zip_safe=False,
)
