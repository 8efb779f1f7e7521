from setuptools import find_packages, setup

setup(
    name="linkcell",
    version="0.1.0",
    description="Cell lists for grouping items and binning 3D points into uniform grids",
    long_description=open("README.rst").read(),
    long_description_content_type="text/x-rst",
    author="The Linkcell contributors",
    license="BSD-3-Clause",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"linkcell": ["*.pyi"]},
    install_requires=["numpy >= 1.25"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering",
    ],
)
