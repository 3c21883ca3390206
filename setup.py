from setuptools import setup, find_packages

with open("README.md", "r") as f:
    long_description = f.read()

setup(
    name="pydomainextractor",
    version="1.0.0",
    description="Split domains into subdomain, domain, and public suffix "
                "using the Public Suffix List",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="GPL-3.0-or-later",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 or later "
        "(GPLv3+)",
        "Topic :: Internet :: Name Service (DNS)",
    ],

    packages=find_packages(include=["pydomainextractor",
                                    "pydomainextractor.*"]),
    package_data={
        "pydomainextractor": ["data/public_suffix_list.dat"],
    },
    install_requires=[
        "requests",
        "dnspython",
        "idna>=3.20",
    ],
    python_requires=">=3.9",
    extras_require={
        "docs": ["sphinx"],
        "test": [
            "flake8",
            "pytest",
            "pytest-cov",
            "pytest-mock",
        ]
    },

    entry_points={
        "console_scripts": [
            "pydomainextractor=pydomainextractor.main:main",
        ],
    },
)
