""" Hcurve setup script.

"""

import os
from setuptools import setup


name = 'hcurve'
description = 'Hermite curve editing toolkit'

# Get version and docstring
__version__ = None
__doc__ = ''
docStatus = 0 # Not started, in progress, done
initFile = os.path.join(os.path.dirname(os.path.abspath(__file__)), name, '__init__.py')
with open(initFile) as f:
    for line in f.readlines():
        if (line.startswith('__version__')):
            exec(line.strip())
        elif line.startswith('"""'):
            if docStatus == 0:
                docStatus = 1
                line = line.lstrip('"')
            elif docStatus == 1:
                docStatus = 2
        if docStatus == 1:
            __doc__ += line


setup(
    name = name,
    version = __version__,
    license = '(new) BSD',
    
    keywords = "spline curve hermite catmull-rom interpolation",
    description = description,
    long_description = __doc__,
    
    platforms = 'any',
    provides = ['hcurve'],
    python_requires = '>=3.8',
    install_requires = ['numpy', 'numba'],
    extras_require = {'app': ['visvis'],
                      'test': ['pytest'],
                     },
    
    packages = ['hcurve',
                'hcurve.interp',
                'hcurve.apps',
               ],
    package_dir = {'hcurve': 'hcurve'},
    zip_safe = False,
    
    classifiers=[
          'Development Status :: 3 - Alpha',
          'Intended Audience :: Science/Research',
          'License :: OSI Approved :: BSD License',
          'Operating System :: MacOS :: MacOS X',
          'Operating System :: Microsoft :: Windows',
          'Operating System :: POSIX',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
          ],
    )
