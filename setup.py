"""
Setup script for the kgp-client package.

Installs the ``kgp_client`` library and the ``kgp-client`` command,
which runs the random demo agent against a KGP server.
"""

from setuptools import setup, find_packages

setup(
    name="kgp-client",
    version="1.0.0",
    description="KGP client - connect a Kalah agent to a Kalah Game Protocol tournament server",
    author="kgp-client contributors",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "kgp-client=kgp_client.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment :: Board Games",
    ],
)
