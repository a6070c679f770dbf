#!/usr/bin/env python
# coding=utf-8
"""Build step that invokes fabric scripts.

Fabinvoke assembles a command line for the fabric `fab` tool from job fields
and runs it as a child process:
* arguments are synthesized in a fixed order, optional flags only when set
* the child runs in the job workspace with the job environment
* output is streamed into a caller-owned sink and the result is a plain bool
* Fabinvoke uses [gevent](https://github.com/gevent/gevent) library for child processes

Example:
  $ fabinvoke --fabfile fabfile.py -H 10.0.0.1 --user deploy deploy_app

"""
"""
The MIT License (MIT)

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""
__description__ = 'Build step that invokes fabric scripts'
__keywords__ = 'fabric, fabfile, deployment, build step, subprocess'
__url__ = ''
__author__ = 'Fabinvoke developers'
__credits__ = ["Fabinvoke developers"]
__license__ = "MIT"
__version__ = "0.1.0"
__maintainer__ = "Fabinvoke developers"
__email__ = ""
__status__ = "Development"
