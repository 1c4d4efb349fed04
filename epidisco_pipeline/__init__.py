# -*- coding: utf-8 -*-

from .base import load_parameters, load_parameters_files, merge_dictlikes, print_config

__author__ = """Epidisco Developers"""

from epidisco_pipeline._version import __version__

__all__ = [
    "__version__",
    "load_parameters",
    "load_parameters_files",
    "merge_dictlikes",
    "print_config",
]
