"""Setup script for the data validation package."""
from setuptools import setup, find_packages

setup(
    name="datavalidation",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    description="Repetition type-checking and range-checking validation of user input",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords="input validation prompt retry console",
    include_package_data=True,
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Software Development :: User Interfaces",
    ],
)
