#!/usr/bin/env python
# coding=utf-8
import re
from setuptools import setup, find_packages, Command
from os.path import join, dirname


class PyTest(Command):
    user_options = []
    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        import subprocess
        errno = subprocess.call(['py.test'])
        raise SystemExit(errno)


def read(*names):
    with open(join(dirname(__file__), *names)) as f:
        return f.read()


# fabinvoke/__init__.py is parsed instead of imported: gevent may be not installed yet
about = dict(re.findall(r"^__(\w+)__ = ['\"](.*)['\"]$", read('fabinvoke', '__init__.py'), re.M))

setup(
name='fabinvoke',
version=about['version'],
author = about['author'],
author_email = about['email'],
description = about['description'],
license = about['license'],
keywords = about['keywords'],
long_description=read('README.md'),
long_description_content_type='text/markdown',
packages=find_packages(exclude=['tests']),
cmdclass = {'test': PyTest},
python_requires='>=3.6',
install_requires=['gevent', 'PyYAML'],
extras_require={
'test': ['pytest'],
},
entry_points={
'console_scripts': [
'fabinvoke = fabinvoke.main:run',
]
},
classifiers=[
'Development Status :: 3 - Alpha',
'Environment :: Console',
'Intended Audience :: Developers',
'Intended Audience :: System Administrators',
'License :: OSI Approved :: MIT License',
'Operating System :: MacOS :: MacOS X',
'Operating System :: Unix',
'Operating System :: POSIX',
'Programming Language :: Python',
'Programming Language :: Python :: 3',
'Topic :: Software Development',
'Topic :: Software Development :: Build Tools',
'Topic :: System :: Software Distribution',
'Topic :: System :: Systems Administration',
],
)
