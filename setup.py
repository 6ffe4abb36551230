#!/usr/bin/env python

from setuptools import setup

setup(name='pianodrill',
      version='1.0',
      description='A python library for drilling major and minor scale construction on a two-octave keyboard',
      install_requires=['numpy', 'matplotlib'],
      extras_require={
        'dev': [ 'ipdb' ],
        'test': [ 'pytest' ],
      },
      package_dir = {'pianodrill': 'src'},
      packages = ['pianodrill', 'pianodrill.config', 'pianodrill.test'],
     )
