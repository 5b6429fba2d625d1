#!/usr/bin/env python3

from setuptools import setup

setup(
    name='LiniconTheme',
    version='1.0.0',
    description="Get the user's current icon theme on Linux",
    license='GPL-2.0-or-later',
    packages=['LiniconTheme'],
    python_requires='>=3.9',
    extras_require={
        'qt': ['PyQt6'],
        'test': ['pytest', 'PyQt6'],
    },
    classifiers=[
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Topic :: Desktop Environment',
    ],
)
