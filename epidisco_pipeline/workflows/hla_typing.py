# -*- coding: utf-8 -*-
"""HLA typing and resolution of the MHC alleles used for epitope prediction

Allele sources are used in the following order of priority, the first available one wins:

1. MHC alleles given explicitly in the parameters
2. Seq2HLA on the RNA reads
3. OptiType, where the result on the normal DNA is preferred over the one on the tumor DNA,
   which is preferred over the one on the tumor RNA

If no source is available, no epitope prediction is performed.  All requested OptiType runs are
performed and reported, even if their results are not used.
"""

import enum
import typing

import attr

from epidisco_pipeline.utils import first_present


class AlleleSourceKind(enum.StrEnum):
    """Where the MHC alleles for epitope prediction come from"""

    MHC_ALLELES = "mhc_alleles"
    SEQ2HLA = "seq2hla"
    OPTITYPE = "optitype"


@attr.s(frozen=True, auto_attribs=True)
class AlleleSource:
    """The resolved source of MHC alleles"""

    #: Kind of the source
    kind: AlleleSourceKind
    #: Allele names for ``MHC_ALLELES``, the typing result otherwise
    value: typing.Any


def resolve_optitype(normal=None, tumor=None, rna=None):
    """Return the OptiType result to fall back to: normal, else tumor, else RNA"""
    return first_present(normal, tumor, rna)


def resolve_allele_source(mhc_alleles=None, seq2hla=None, optitype=None) -> AlleleSource | None:
    """Return the allele source with the highest priority, ``None`` if there is none

    ``optitype`` is the result of :func:`resolve_optitype`.
    """
    if mhc_alleles is not None:
        return AlleleSource(AlleleSourceKind.MHC_ALLELES, tuple(mhc_alleles))
    elif seq2hla is not None:
        return AlleleSource(AlleleSourceKind.SEQ2HLA, seq2hla)
    elif optitype is not None:
        return AlleleSource(AlleleSourceKind.OPTITYPE, optitype)
    else:
        return None


def seq2hla_hla(semantics, fastqs):
    """Run Seq2HLA on the concatenation of ``fastqs``"""
    return semantics.save("Seq2HLA", semantics.seq2hla(semantics.concat(fastqs)))


def optitype_hla(semantics, fastqs, input_type, name):
    """Run OptiType on the concatenation of ``fastqs``, saved as ``OptiType-{name}``"""
    return semantics.save(
        "OptiType-" + name, semantics.optitype(input_type, semantics.concat(fastqs))
    )


def alleles_node(semantics, source: AlleleSource | None):
    """Return MHC alleles node for the resolved ``source``, ``None`` if there is none"""
    if source is None:
        return None
    elif source.kind == AlleleSourceKind.MHC_ALLELES:
        return semantics.mhc_alleles(source.value)
    else:
        return semantics.hlarp(source.kind.value, source.value)
