#!/usr/bin/env python3
from __future__ import annotations

import re
import setuptools
import pathlib
import sys
import toml

__minver__ = '3.8'
__github__ = 'https://github.com/b64d/b64d/'
__author__ = 'The b64d developers'
__slogan__ = 'Find base64 encoded payloads in text and print the readable ones.'
__topics__ = [
    'Development Status :: 3 - Alpha',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Security',
    'Topic :: Text Processing :: Filters',
    'Topic :: Utilities',
]
__build_only__ = {'setuptools', 'wheel', 'toml'}


def get_config():
    sys.path.insert(0, str(pathlib.Path(__file__).parent.absolute()))

    import b64d

    def get_setup_readme(filename: str | pathlib.Path | None = None):
        if filename is None:
            filename = pathlib.Path(__file__).parent.joinpath('README.md')
        with open(filename, 'r', encoding='UTF8') as README:
            def complete_link(match):
                return F'({__github__}blob/master/{match[1]})'
            readme = README.read()
            return re.sub(R'(?<=\])\((?!\w+://)(.*?)\)', complete_link, readme)

    def get_requirements(extra: str | None = None) -> list[str]:
        ppcfg: dict = toml.load('pyproject.toml')
        if extra is None:
            requirements = ppcfg['build-system']['requires']
            return [r for r in requirements if re.split('[<>=~! ]', r)[0] not in __build_only__]
        return ppcfg['tool']['b64d']['extras'][extra]

    return dict(
        name=b64d.__distribution__,
        version=b64d.__version__,
        author=__author__,
        description=__slogan__,
        long_description=get_setup_readme(),
        long_description_content_type='text/markdown',
        url=__github__,
        python_requires=F'>={__minver__}',
        classifiers=__topics__,
        packages=setuptools.find_packages(include=('b64d*',)),
        install_requires=get_requirements(),
        extras_require={'test': get_requirements('test')},
        entry_points={'console_scripts': ['b64d=b64d.cli:main']},
    )


if __name__ == '__main__':
    setuptools.setup(**get_config())
