#!/usr/bin/env python3

import re
from pathlib import Path

from setuptools import setup

_version = re.search(r"^__version__ = '(.+)'$",
                     Path(__file__).parent.joinpath('passgen', '__init__.py').read_text(),
                     re.MULTILINE).group(1)

setup(
    name='passgen',
    version=_version,
    description='XKCD-style password generator',
    packages=['passgen'],
    package_data={'passgen': ['words.txt', 'short-words.txt']},
    python_requires='>=3.8',
    install_requires=['blessed', 'pyperclip'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['passgen = passgen.main:main']},
)
