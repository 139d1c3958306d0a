import os
from pathlib import Path
from typing import Union

import pytest
from hypothesis import settings

settings.register_profile('ci', max_examples=1000, deadline=None)
settings.register_profile('dev', max_examples=50)
settings.load_profile(os.getenv('HYPOTHESIS_PROFILE', 'default'))


def _helper_module_names(base_dir: Union[str, Path], base_package: str) -> list[str]:
    '''Return the import paths of the non-test modules under a directory.

    Parameters
    ----------
    base_dir
        Directory path to search from (e.g. 'tests')
    base_package
        Base package name (e.g. 'tests')

    Returns
    -------
        List of module paths (e.g. ['tests.utils.st', ...])
    '''
    base_dir = Path(base_dir)

    paths = base_dir.rglob('*.py')
    paths = (p for p in paths if p.name not in ('__init__.py', 'conftest.py'))
    paths = (p for p in paths if not p.name.startswith('test_'))

    module_parts = ([*p.relative_to(base_dir).parent.parts, p.stem] for p in paths)
    return [f"{base_package}.{'.'.join(parts)}" for parts in module_parts]


_HERE = Path(__file__).resolve().parent

pytest.register_assert_rewrite(*_helper_module_names(_HERE, __package__))
