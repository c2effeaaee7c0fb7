from setuptools import setup, find_packages

setup(
    name="recency-cache",
    version="0.1.0",
    description="Fixed-capacity in-memory LRU cache with O(1) get and put",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "structlog>=24.1.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
        ],
    },
    python_requires=">=3.10",
)
