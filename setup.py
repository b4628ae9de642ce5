# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='lifo',
  version='0.0.1',
  description='A generic last-in-first-out stack for Python 3.',
  python_requires='>=3.12',
  packages=['lifo', 'utest'],
  install_requires=['typing_extensions'],
)
