"""
Betterknown
===========

Convert between WKT, EWKT and GeoSPARQL WKT and GeoJSON geometries.
"""

from setuptools import find_packages, setup


setup(
    name='betterknown',
    version='1.0.0',
    description='WKT to GeoJSON and back',
    long_description=__doc__,
    license='Apache 2.0',
    packages=find_packages(exclude=['tests']),
    install_requires=[
        'attrs',
        'click',
        'pyproj',
    ],
    python_requires='>=3.7.1',
    tests_require=[
        'pytest',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'betterknown = betterknown.cli:main',
        ]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Environment :: Console',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: GIS',
    ]
)
