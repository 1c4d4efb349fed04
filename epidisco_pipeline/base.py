# -*- coding: utf-8 -*-
"""Basic utility code for epidisco_pipeline
"""

from collections import OrderedDict
from collections.abc import MutableMapping
import sys
from typing import Any, Dict, Iterable

from pydantic import ValidationError
import ruamel.yaml as ruamel_yaml

from .models.parameters import Parameters


class InvalidConfiguration(Exception):
    """Raised on invalid configuration"""


class MissingConfiguration(InvalidConfiguration):
    """Raised on missing configuration"""


type DictLike = Dict | MutableMapping


def merge_dictlikes[D](dict1: DictLike, dict2: DictLike, dict_class: D = OrderedDict) -> D:
    """Merge dictionary ``dict2`` into ``dict1``"""

    def _merge_inner(d1: DictLike, d2: DictLike) -> D:
        DICT_LIKE = DictLike.__value__
        for k in d1.keys() | d2.keys():
            if k in d1 and k in d2:
                if isinstance(d1[k], DICT_LIKE) and isinstance(d2[k], DICT_LIKE):
                    yield k, dict_class(_merge_inner(d1[k], d2[k]))
                else:
                    # If one of the values is not a dict, you can't continue
                    # merging it.  Value from second dict overrides one in
                    # first and we move on.
                    yield k, d2[k]
            elif k in d1:
                yield k, d1[k]
            else:
                yield k, d2[k]

    return dict_class(_merge_inner(dict1, dict2))


def load_parameters(config: Dict[str, Any] | None) -> Parameters:
    """Validate the parameters in ``config``

    :raises MissingConfiguration: if ``config`` is empty
    :raises InvalidConfiguration: if ``config`` does not describe valid parameters
    """
    if not config:
        raise MissingConfiguration("No pipeline parameters given")
    try:
        return Parameters(**config)
    except ValidationError as e:
        raise InvalidConfiguration("Invalid pipeline parameters:\n{}".format(e)) from e


def load_parameters_files(paths: Iterable[str]) -> Parameters:
    """Load parameters from YAML files, later files are merged over earlier ones"""
    yaml = ruamel_yaml.YAML(typ="safe")
    config = OrderedDict()
    for path in paths:
        with open(path, "rt") as inputf:
            data = yaml.load(inputf) or {}
        if not isinstance(data, MutableMapping):
            raise InvalidConfiguration("Parameters file {} does not contain a mapping".format(path))
        config = merge_dictlikes(config, data)
    return load_parameters(config)


def print_config(parameters: Parameters, file=None):
    """Print human-readable version of parameters to ``file``"""
    file = file or sys.stderr
    print("\nParameters", file=file)
    print("----------\n", file=file)
    print(parameters.model_dump_yaml(exclude_none=True), file=file)
