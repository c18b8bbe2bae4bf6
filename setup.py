from setuptools import setup, find_packages
from mavenup import VERSION

with open('README.md') as fd:
    read_me = fd.read()

# noinspection SpellCheckingInspection
setup(
    name='mavenup',
    version=VERSION,
    description='Apache Maven installer for version managers',
    long_description=read_me,
    long_description_content_type='text/markdown',
    license='Apache 2.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    install_requires=[
        'click', 'requests'
    ],
    extras_require={
        'test': ['pytest']
    },
    python_requires='>=3.12.0',
    entry_points='''
        [console_scripts]
        mavenup=mavenup.main:cli
    ''',
)
