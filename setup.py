from setuptools import setup, find_packages

setup(
    name="segtree",
    version="0.1.0",
    description="Array-backed segment trees for range aggregate queries",
    author="Your Name",
    author_email="your.email@example.com",
    packages=find_packages(exclude=["tests", "examples"]),
    install_requires=[
        "numpy",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.6",
)
