from itertools import chain
from setuptools import setup

extras = {
    'test': ['pytest>=3.10', 'flake8', 'coverage'],
}
# 'all' includes all of the above
extras['all'] = list(chain(*extras.values()))

setup(name='scalarset',
      version='2023.0.0',
      description='Insertion-ordered sets of scalar values with set algebra.',
      author='The scalarset developers',
      license='LGPL-3',
      packages=['scalarset'],
      package_dir={'scalarset': 'scalarset'},
      install_requires=['numpy'],
      extras_require=extras
      )
