from setuptools import setup, find_packages

setup(
    name="st3pbot",
    version="0.1.0",
    packages=find_packages(include=["st3pbot", "st3pbot.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pytest-timeout>=2.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "st3pbot=st3pbot.cli:main",
        ],
    },
)
