# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='hay',
  version='0.1.0',
  description='hay provides a growable and shrinkable stack backed by a list, for Python 3.',
  license='CC0-1.0',
  python_requires='>=3.10',

  packages=['hay', 'utest'],
  install_requires=['typing_extensions>=4.0'],
)
