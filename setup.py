#!/usr/bin/env python3

from pathlib import Path
from setuptools import setup

version = (Path(__file__).parent / 'VERSION').read_text().strip()

setup(
    name='dicephrase',
    version=version,
    description='Diceware passphrase generator',
    packages=['dicephrase', 'dicephrase.backend'],
    python_requires='>=3.7',
    install_requires=['PyNaCl', 'pyperclip'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['dicephrase = dicephrase.main:main']},
)
