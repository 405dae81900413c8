# This is the version of this tree, as created by setup.py's version file.
# setup.py reads manual_verstr and auto_build_num out of this file.

manual_verstr = "0.1"

auto_build_num = "0"

__version__ = manual_verstr + "." + auto_build_num
