from setuptools import setup

version = (
    open("./_version.py").read().strip().replace("__version__ = ", "").replace("'", "")
)


README = open("./README.md").read()


setup(
    name="lakemetab",
    version=version,
    description="Lake surface mixed layer dissolved oxygen and phytoplankton metabolism model",
    long_description=README,
    long_description_content_type="text/markdown",
    classifiers=[
        # Get strings from
        # http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Education",
        "Environment :: Console",
        "License :: OSI Approved :: GNU Lesser General Public License v2 (LGPLv2)",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Hydrology",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="limnology lake metabolism dissolved oxygen phytoplankton",
    author="RESPEC, Inc",
    author_email="",
    url="",
    packages=["METAB", "METABtools", "METABIO"],
    py_modules=["_version"],
    zip_safe=False,
    install_requires=["numpy", "pandas", "numba", "tables", "cltoolbox"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["lakemetab=METABtools.METAB_CLI:main"]},
    python_requires=">=3.8",
)
