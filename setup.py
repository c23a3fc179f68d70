# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='glimpse',
  version='0.1.0',
  description='Glimpse builds HTML markup from tag objects, escaping user content by default.',
  python_requires='>=3.11',

  packages=['glimpse', 'utest'],
  extras_require={
    'web': ['starlette'],
    'test': ['markupsafe', 'pytest', 'starlette'],
  },
)
