# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the xsemver Project


import fnmatch
import os
import os.path
import sys


try:
    from setuptools import setup, find_packages
except ImportError:
    print("install failed - requires setuptools", file=sys.stderr)
    sys.exit(1)

# carefully import some sourcefiles that are standalone
source_path = os.path.dirname(os.path.realpath(__file__))
src_path = os.path.join(source_path, "src")
sys.path.insert(0, src_path)

_version_ns = {}
with open(os.path.join(src_path, "xsemver", "utils", "_version.py")) as f:
    exec(f.read(), _version_ns)
_xsemver_version = _version_ns["_xsemver_version"]


def find_files(pattern, path=None, root="xsemver"):
    paths = []
    basepath = os.path.realpath(os.path.join("src", root))
    path_ = basepath
    if path:
        path_ = os.path.join(path_, path)

    for root, _, files in os.walk(path_):
        files = [x for x in files if fnmatch.fnmatch(x, pattern)]
        files = [os.path.join(root, x) for x in files]
        paths += [x[len(basepath):].lstrip(os.path.sep) for x in files]

    return paths


this_directory = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(this_directory, 'README.md')) as f:
    long_description = f.read()


setup(
    name="xsemver",
    version=_xsemver_version,
    description=("Semantic version parsing, comparison and range matching, "
                 "with configurable version templates."),
    keywords="version semver range wildcard compare dependency",
    long_description=long_description,
    long_description_content_type='text/markdown',
    maintainer="Contributors to the xsemver project",
    license="Apache-2.0",
    zip_safe=False,
    package_dir={'': 'src'},
    packages=find_packages('src'),
    package_data={
        'xsemver':
            find_files('*', 'tests/data'),
    },
    install_requires=[
        "schema",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest",
            "parameterized",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: Apache Software License",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Libraries",
    ],
    python_requires=">=3.7",
)
