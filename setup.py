import os

from setuptools import setup, find_packages

version_file = os.path.join(os.path.dirname(__file__), "wsq_subband", "version.py")
with open(version_file, "r") as f:
    exec(f.read())

readme_file = os.path.join(os.path.dirname(__file__), "README.md")
with open(readme_file, "r") as f:
    long_description = f.read()

setup(
    name="wsq_subband",
    version=__version__,  # noqa: F821 -- loaded by 'exec' above
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    description=(
        "Two-channel wavelet subband analysis and synthesis for WSQ-style "
        "picture compression."
    ),
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="GPL-3.0-only",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS",
        "Programming Language :: Python :: 3",
        "Topic :: Multimedia :: Graphics",
    ],
    keywords="wavelet subband wsq filter-bank image-compression",
    python_requires=">=3.6",
    install_requires=[
        "pillow",
        "numpy",
    ],
    extras_require={
        "tests": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "wsq-subband-roundtrip=wsq_subband.scripts.wsq_subband_roundtrip:main",
        ],
    },
)
