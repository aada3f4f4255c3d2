import os

from setuptools import find_packages
from setuptools import setup

root = os.path.dirname(os.path.realpath(__file__))

# Read version
with open(os.path.join(root, "VERSION")) as f:
    version = f.read().strip()

# Write version.py
with open(os.path.join(root, "osc/version.py"), "w") as f:
    f.write("__version__ = '{}'\n".format(version))

setup(
    name='osc-cli',
    version=version,
    zip_safe=False,
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.6',
    install_requires=[
        'click>=7.0',
        'click-log',
        'requests',
        'pyyaml>=5.1',
    ],
    extras_require={
        'test': [
            'mock',
        ],
    },
    entry_points={
        'console_scripts': [
            'osc = osc.cli:main'
        ]
    },
    include_package_data=True,
    test_suite="tests",
)
