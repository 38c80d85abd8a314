""" chamhash build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import chamhash

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=chamhash.name,
    version=chamhash.__version__,
    url="https://chamhash.org",
    project_urls={
        "Download": "https://github.com/chamhash/chamhash/releases",
        "GitHub": "https://github.com/chamhash/chamhash",
        "Issues": "https://github.com/chamhash/chamhash/issues",
    },
    license=chamhash.__license__,
    author=chamhash.__author__,
    author_email=chamhash.__author_email__,
    description="Chameleon hash over prime-order elliptic curves",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    # install_requires=[],
    extras_require={
        "test": ["pytest", "cryptography"],
        "docs": ["sphinx", "sphinx_rtd_theme", "myst_parser"],
    },
    keywords=(
        "chameleon-hash trapdoor-hash elliptic-curves secp256r1 P-256 "
        "redactable-blockchain cryptography"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
