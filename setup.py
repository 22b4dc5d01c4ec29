from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="timelines",
    version="0.1.0",
    author="",
    author_email="",
    description="Temporal interval algebra: periods, value-tagged periods and timeline reconciliation",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["timelines", "timelines.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.3.0",
        "python-dateutil>=2.8.0",
        "isoweek>=1.3.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)
