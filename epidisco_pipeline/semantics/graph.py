# -*- coding: utf-8 -*-
"""Task nodes and the graph built by the recording backend"""

from collections import Counter, OrderedDict
import enum
import typing

import attr
from pydantic import BaseModel


class OutputKind(enum.StrEnum):
    """Kind of the value a task produces"""

    FILE = "File"
    FASTQ = "Fastq"
    FASTQC = "Fastqc"
    BAM = "Bam"
    BED = "Bed"
    VCF = "Vcf"
    FLAGSTAT = "Flagstat"
    GTF = "Gtf"
    SEQ2HLA_RESULT = "Seq2hlaResult"
    OPTITYPE_RESULT = "OptitypeResult"
    MHC_ALLELES = "MhcAlleles"
    VAXRANK = "Vaxrank"
    REPORT = "Report"
    EMAIL = "Email"
    LIST = "List"
    PAIR = "Pair"
    UNIT = "Unit"


@attr.s(frozen=True, auto_attribs=True, cache_hash=True)
class TaskNode:
    """One unit of work, compared structurally"""

    #: Name of the operation, e.g., ``"merge_bams"``
    operation: str
    #: Kind of the produced value
    kind: OutputKind
    #: ``(label, value)`` pairs of inputs; a value is a node or a tuple of nodes
    inputs: typing.Tuple[typing.Tuple[str, typing.Any], ...] = ()
    #: ``(key, value)`` pairs of configuration
    config: typing.Tuple[typing.Tuple[str, typing.Any], ...] = ()

    def input(self, label: str) -> typing.Any:
        """Return input with the given ``label``, ``None`` if missing"""
        return dict(self.inputs).get(label)

    def setting(self, key: str) -> typing.Any:
        """Return configuration value for ``key``, ``None`` if missing"""
        return dict(self.config).get(key)

    @property
    def dependencies(self) -> typing.List["TaskNode"]:
        """Nodes this node directly depends on, in input order"""
        result = []
        for _, value in self.inputs:
            result.extend(_nodes_in(value))
        return result


def _nodes_in(value):
    if isinstance(value, TaskNode):
        yield value
    elif isinstance(value, tuple):
        for item in value:
            yield from _nodes_in(item)


def _plain(value):
    """Convert configuration value to plain data for dumping"""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    elif isinstance(value, enum.Enum):
        return value.value
    elif isinstance(value, (tuple, list)):
        return [_plain(item) for item in value]
    else:
        return value


class TaskGraph:
    """Unique nodes reachable from ``root``, dependencies before dependents"""

    def __init__(self, root: TaskNode):
        #: The terminal node
        self.root = root
        #: All nodes in topological order
        self.nodes = self._toposort(root)
        #: Stable node identifiers, derived from the topological position
        self.ids = {node: "n%d" % i for i, node in enumerate(self.nodes)}

    @staticmethod
    def _toposort(root):
        seen = OrderedDict()

        def visit(node):
            if node in seen:
                return
            for dep in node.dependencies:
                visit(dep)
            seen[node] = True

        visit(root)
        return list(seen)

    def __len__(self):
        return len(self.nodes)

    def __contains__(self, node):
        return node in self.ids

    def __eq__(self, other):
        if not isinstance(other, TaskGraph):
            return NotImplemented
        return self.root == other.root

    def __hash__(self):
        return hash(self.root)

    @property
    def saved(self) -> typing.Dict[str, TaskNode]:
        """Mapping from persisted name to the persisted node"""
        return OrderedDict(
            (node.setting("name"), node.input("node"))
            for node in self.nodes
            if node.operation == "save"
        )

    def operations(self) -> Counter:
        """Number of nodes per operation"""
        return Counter(node.operation for node in self.nodes)

    def find(self, operation: str) -> typing.List[TaskNode]:
        """Return all nodes of the given operation in topological order"""
        return [node for node in self.nodes if node.operation == operation]

    def to_dict(self) -> typing.Dict[str, typing.Any]:
        """Return plain data representation, e.g., for YAML output"""
        nodes = []
        for node in self.nodes:
            inputs = {}
            for label, value in node.inputs:
                if isinstance(value, TaskNode):
                    inputs[label] = self.ids[value]
                else:
                    inputs[label] = [self.ids[dep] for dep in _nodes_in(value)]
            nodes.append(
                {
                    "id": self.ids[node],
                    "operation": node.operation,
                    "kind": node.kind.value,
                    "inputs": inputs,
                    "config": {k: _plain(v) for k, v in node.config},
                }
            )
        return {"root": self.ids[self.root], "nodes": nodes}

    def to_dot(self, name: str = "epidisco") -> str:
        """Return Graphviz representation"""
        lines = ['digraph "{}" {{'.format(name)]
        for node in self.nodes:
            label = node.operation
            if node.operation == "save":
                label = "save\\n{}".format(node.setting("name"))
            lines.append('  {} [label="{}"]'.format(self.ids[node], label))
        for node in self.nodes:
            for dep in node.dependencies:
                lines.append("  {} -> {}".format(self.ids[dep], self.ids[node]))
        lines.append("}")
        return "\n".join(lines) + "\n"
