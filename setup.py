from setuptools import setup, find_packages

setup(
    name="ultimate-ttt-rules",
    version="1.0.0",
    packages=find_packages(include=["uttt", "uttt.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
