"""
yaffont.base.imports - supporting functions for imports of external modules

licence: https://opensource.org/licenses/MIT
"""

import logging
from importlib import import_module


def safe_import(module_name, name=None):
    """Wrapper for importing external modules and dealing with their errors."""
    item = None
    try:
        module = import_module(module_name)
    except ImportError as e:
        logging.debug('Could not import module `%s`: %s', module_name, e)
    except Exception as e:
        logging.warning('Error while importing module `%s`: %s', module_name, e)
    else:
        if name:
            item = getattr(module, name)
        else:
            item = module
    return item


def require(module, feature, package):
    """Raise if a module imported through safe_import is not available."""
    if module is None:
        raise ImportError(f'{feature} requires module `{package}`; not found.')
    return module
