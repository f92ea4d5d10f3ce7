"""Setup for Blotter packaging"""

from os import path

from setuptools import find_packages, setup

here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

main_ns = {}
ver_path = path.join(here, 'blotter', '__version__.py')
with open(ver_path, encoding='utf-8') as ver_file:
    exec(ver_file.read(), main_ns)


setup(
    name='Blotter',

    version=main_ns['__version__'],

    description='Parses flat-file blog entries into structured posts for static sites',

    long_description=long_description,

    long_description_content_type='text/markdown',

    classifiers=[
        'Development Status :: 4 - Beta',

        'Intended Audience :: Developers',

        'License :: OSI Approved :: MIT License',

        'Natural Language :: English',

        'Programming Language :: Python :: 3',

        'Topic :: Internet :: WWW/HTTP :: Site Management',
        'Topic :: Text Processing :: Markup :: HTML',
    ],

    keywords='blog static-site markdown publishing',

    packages=find_packages(exclude=['tests']),

    install_requires=[
        'arrow',
        'awesome-slugify',
        'click',
        'misaka',
        'pygments',
        'python-dateutil',
    ],

    extras_require={
        'dev': [
            'autopep8',
            'flake8',
            'isort',
            'mypy',
            'pylint',
            'twine',
        ],
        'test': [
            'pytest',
        ],
    },

    entry_points={
        'console_scripts': [
            'blotter = blotter.cli:main',
        ],
    },

    python_requires=">=3.6",
)
