"""Package build script"""
import setuptools

ver_file = 'VERSION'

# Pull package version number from the VERSION file
with open(ver_file, 'r') as f:
    __version__ = f.read().strip()

    if not __version__:
        raise EnvironmentError(f'Could not find valid version number in {ver_file}; aborting setup')

with open("./README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="geokey",
    version=__version__,
    author="",
    author_email="",
    description="Spherical earth distances and spatial key bit resolution.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(
        include=('geokey*', ),
        exclude=('*tests', 'tests*')
    ),
    package_data={"geokey": ["py.typed"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
