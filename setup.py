#!/usr/bin/env python
from setuptools import setup, find_packages
import os, re

PKG='txoauth1'
VERSIONFILE = os.path.join('txoauth1', '_version.py')
verstr = "unknown"
try:
    verstrline = open(VERSIONFILE, "rt").read()
except EnvironmentError:
    pass # Okay, there is no version file.
else:
    MVSRE = r"^manual_verstr *= *['\"]([^'\"]*)['\"]"
    mo = re.search(MVSRE, verstrline, re.M)
    if mo:
        mverstr = mo.group(1)
    else:
        print("unable to find version in %s" % (VERSIONFILE,))
        raise RuntimeError("if %s.py exists, it must be well-formed" % (VERSIONFILE,))
    AVSRE = r"^auto_build_num *= *['\"]([^'\"]*)['\"]"
    mo = re.search(AVSRE, verstrline, re.M)
    if mo:
        averstr = mo.group(1)
    else:
        averstr = ''
    verstr = '.'.join([mverstr, averstr])

install_requires = ['pyutil >= 1.7.9', 'Twisted', 'zope.interface']
tests_require = ['mock']

# Run the tests with "trial txoauth1" (pytest collects them too).

setup(name=PKG,
      version=verstr,
      description="OAuth 1.0a HMAC-SHA1 request signing for Twisted HTTP clients",
      long_description=open('README.rst').read(),
      packages = find_packages(),
      include_package_data=True,
      license = "MIT License",
      python_requires=">=3.8",
      install_requires=install_requires,
      extras_require={'test': tests_require},
      keywords="oauth oauth1 hmac-sha1 twisted",
      zip_safe=False)
