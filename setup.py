#!/usr/bin/env python

from setuptools import setup

setup(name='fretfinder',
      version='1.0',
      description='A python library for finding and ranking playable guitar chord voicings',
      author='Andrey Barsky',
      author_email='andrey.barsky@gmail.com',
      install_requires=['numpy'],
      extras_require={
        'dev': [ 'ipdb' ],
        'test': [ 'pytest' ],
      },
      package_dir = {'fretfinder': 'src'},
      packages = ['fretfinder', 'fretfinder.config', 'fretfinder.scripts', 'fretfinder.test'],
     )
