# ------------------------------------------------------------------------------
# Name:          setup.py
# Purpose:       install cocina2mods package
#
# Authors:       Greg Chapman
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

import setuptools

# must be kept up to date with cocina2mods/shared/sharedconstants.py:_COCINA2MODS_VERSION
cocina2modsversion = '1.0.0'

if __name__ == '__main__':
    setuptools.setup(
        name='cocina2mods',
        version=cocina2modsversion,

        description='A Cocina descriptive metadata to MODS XML converter package and command line tool',
        long_description=open('README.md').read(),
        long_description_content_type='text/markdown',

        url='https://github.com/gregchapman-dev/cocina2mods',

        author='Greg Chapman',
        author_email='gregc@mac.com',

        classifiers=[
            'Development Status :: 4 - Beta',
            'License :: OSI Approved :: MIT License',
            'Programming Language :: Python :: 3 :: Only',
            'Operating System :: OS Independent',
            'Natural Language :: English',
        ],

        keywords=[
            'metadata',
            'cocina',
            'MODS',
            'XML',
            'library',
            'catalog',
            'converter',
            'conversion',
            'writer',
        ],

        packages=setuptools.find_packages(exclude=['tests', 'tests.*']),

        python_requires='>=3.10',

        install_requires=[
            'music21>=9.1',
        ],

        extras_require={
            'test': ['pytest'],
        },

        entry_points={
            'console_scripts': [
                'cocina2mods=cocina2mods.__main__:main',
            ],
        },

        project_urls={
            'Source': 'https://github.com/gregchapman-dev/cocina2mods',
            'Bug Reports': 'https://github.com/gregchapman-dev/cocina2mods/issues',
        }
    )
