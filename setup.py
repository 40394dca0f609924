from setuptools import setup

DEPENDENCIES = [
    "colorama>=0.4.1",
    "configobj>=5.0.6",
    "mozinfo>=1.1.0",
    "mozlog>=4.0",
    "semver>=3.0",
]

TEST_DEPENDENCIES = [
    "coverage>=5.0",
    "flake8>=3.7",
    "mock>=3.0",
    "pytest>=5.0",
    "pytest-mock>=1.10",
]

desc = """Regression range finder for Electron fiddles"""
long_desc = """Regression range finder for Electron fiddles.
Bisects an ordered list of Electron versions, either by asking the
operator for each version or by running a test command unattended."""

setup(
    name="fiddlebisect",
    version="0.1.0",
    description=desc,
    long_description=long_desc,
    license="MPL 2.0",
    packages=["fiddlebisect"],
    entry_points="""
          [console_scripts]
          fiddlebisect = fiddlebisect.main:main
        """,
    platforms=["Any"],
    python_requires=">=3.6",
    install_requires=DEPENDENCIES,
    extras_require={"test": TEST_DEPENDENCIES},
    classifiers=[
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
    ],
)
