import enum
from enum import Enum
from io import StringIO
import json
import re
import typing
from typing import Annotated

from annotated_types import Predicate
from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticUndefined
import ruamel
from ruamel.yaml import YAML


def enum_options(enum: Enum) -> list[tuple[str, typing.Any]]:
    """Returns a list of tuples containing the name and value of each enum member."""
    return [(e.name, e.value) for e in enum]


def EnumField(enum: type[Enum], default: typing.Any = PydanticUndefined, *args, **kwargs):
    """
    An extension of pydantic's `Field` that adds 'options' to the json_schema_extra field,
    containing the available options of the specified enum.
    """
    extra = kwargs.get("json_schema_extra", {})
    extra.update(dict(options=enum_options(enum)))
    kwargs["json_schema_extra"] = extra
    return Field(default, *args, **kwargs)


java_heap_regexp = re.compile(r"^[0-9]+[kKmMgGtT]$")
JavaHeapString = Annotated[str, Predicate(lambda s: java_heap_regexp.match(s) is not None)]
"""A Java heap size as passed to ``-Xmx``, e.g. '8g'."""


class Sorting(enum.StrEnum):
    """Sort order of a BAM file used as pipeline input."""

    coordinate = "coordinate"
    read_name = "read_name"


class EpidiscoModel(BaseModel):
    """
    Base class for all epidisco models.
    Extra fields are forbidden, attribute docstrings are used for field descriptions,
    enum member values instead of names are used, default values are validated and
    instances are immutable once constructed.
    """

    model_config = ConfigDict(
        extra="forbid",
        use_attribute_docstrings=True,
        use_enum_values=True,
        validate_default=True,
        frozen=True,
    )

    def get(self, key: str, default: typing.Any = None) -> typing.Any:
        """
        Return the value of the field with the given key, or the default value if it doesn't exist.
        Simply delegates to getattr.
        """
        return getattr(self, key, default)

    def model_dump_yaml(self, **kwargs) -> str:
        cfg = _model_to_yaml(self, **kwargs)
        return _dump_yaml(cfg)


INDENTATION = 2  # Indentation used for YAML


def _yaml_instance():
    yaml = YAML(typ="rt")
    yaml.indent(mapping=INDENTATION, sequence=INDENTATION * 2, offset=INDENTATION)
    return yaml


def _dump_yaml(comment_map: ruamel.yaml.CommentedMap) -> str:
    yaml = _yaml_instance()

    with StringIO() as out:
        yaml.dump(comment_map, stream=out)
        return out.getvalue()


def _model_to_yaml(model_instance: BaseModel, **kwargs) -> ruamel.yaml.CommentedMap:
    yaml = _yaml_instance()
    with StringIO() as s:
        yaml.dump(json.loads(model_instance.model_dump_json(**kwargs)), stream=s)
        s.flush()
        return yaml.load(stream=s.getvalue())
