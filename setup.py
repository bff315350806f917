from setuptools import setup, find_packages

setup(
    name="damas",
    version="1.0.0",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["damas=damas.__main__:main"],
    },
    author="Damas Engine Team",
    description="Spanish draughts rules engine with an alpha-beta automated opponent",
)
