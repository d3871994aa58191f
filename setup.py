from setuptools import setup, find_packages
import boing

setup(
  name              = "boing",
  url               = "https://github.com/obfusk/boing",
  description       = "trampolines for Python",
  version           = boing.__version__,
  author            = "Felix C. Stegerman",
  author_email      = "flx@obfusk.net",
  license           = "GPLv3+",
  classifiers       = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Programming Language :: Python :: Implementation :: CPython",
    "Programming Language :: Python :: Implementation :: PyPy",
    "Topic :: Software Development :: Libraries",
  ],
  keywords          = "trampoline tail-call recursion cps thunk",
  packages          = find_packages(),
  entry_points      = { "console_scripts": ["boing=boing:main_"] },
  python_requires   = ">=3.11",
  install_requires  = ["pyparsing>=3.1", "regex"],
  extras_require    = { "test": ["coverage", "pytest"] },
)
