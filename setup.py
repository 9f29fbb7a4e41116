from setuptools import setup, find_packages

setup(
    name="CIEComparator",
    version="0.1.0",
    description="Compare chromaticity point sets against the CIE 1931 spectral locus",
    packages=find_packages(include=["CIEComparator", "CIEComparator.*"]),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "colour-science>=0.4.4",
        "numpy>=1.24",
        "pandas>=2.0",
        "Pillow>=10.1.0",
    ],  # Core dependencies
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
