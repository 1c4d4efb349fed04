# -*- coding: utf-8 -*-
"""Enumeration of the branches taken by the pipeline

All decisions that depend on the parameter flags and the reference build are collected in a
:class:`BranchPlan`.  The pipeline assembly only follows the plan, and
:func:`iter_branch_plans` allows for visiting every reachable combination.
"""

import itertools
import typing

import attr
from logzero import logger

from epidisco_pipeline.models.parameters import Parameters
from epidisco_pipeline.workflows.hla_typing import (
    AlleleSourceKind,
    resolve_allele_source,
    resolve_optitype,
)

#: Reference builds of mouse genomes, no RNA-based HLA typing is possible for these
MOUSE_BUILDS = ("mm10",)

#: Reference builds for which the variant calls are annotated with PolyPhen
ANNOTATED_BUILDS = ("b37", "hg19")

#: Optional somatic variant callers, in the order their results are reported
OPTIONAL_CALLERS = ("mutect2", "varscan", "somatic-sniper")


@attr.s(frozen=True, auto_attribs=True)
class RnaHlaTyping:
    """HLA typing tools run on the RNA reads"""

    seq2hla: bool
    optitype: bool


#: RNA HLA typing for non-mouse references, keyed by ``(with_seq2hla, with_optitype_rna)``
RNA_HLA_TYPING = {
    (False, False): RnaHlaTyping(seq2hla=False, optitype=False),
    (False, True): RnaHlaTyping(seq2hla=False, optitype=True),
    (True, False): RnaHlaTyping(seq2hla=True, optitype=False),
    (True, True): RnaHlaTyping(seq2hla=True, optitype=True),
}

#: No RNA HLA typing at all
NO_RNA_HLA_TYPING = RNA_HLA_TYPING[(False, False)]


def is_mouse_build(reference_build: str) -> bool:
    return reference_build in MOUSE_BUILDS


def rna_hla_typing(reference_build: str, with_seq2hla: bool, with_optitype_rna: bool):
    """Return the RNA HLA typers to run, none at all for mouse references"""
    if is_mouse_build(reference_build):
        if with_seq2hla or with_optitype_rna:
            logger.debug("Skipping RNA HLA typing for mouse reference %s", reference_build)
        return NO_RNA_HLA_TYPING
    return RNA_HLA_TYPING[(with_seq2hla, with_optitype_rna)]


@attr.s(frozen=True, auto_attribs=True)
class BranchPlan:
    """Every flag-dependent decision of one pipeline run"""

    #: Use the mouse Mutect configuration
    mouse_run: bool
    #: Optional somatic callers to run, from ``OPTIONAL_CALLERS``
    optional_callers: typing.Tuple[str, ...]
    #: Restrict variant calls to the regions of a BED file
    region_filter: bool
    #: Run the RNA branch
    rna: bool
    #: HLA typing on RNA reads
    rna_hla_typing: RnaHlaTyping
    #: Samples to run OptiType on the DNA reads of, subset of ``("Normal", "Tumor")``
    dna_optitype: typing.Tuple[str, ...]
    #: Source of the MHC alleles, ``None`` if there is none
    allele_source: AlleleSourceKind | None
    #: Predict vaccine peptides with Vaxrank
    vaxrank: bool
    #: Annotate variant calls with PolyPhen
    annotate_vcfs: bool
    #: Send notification emails
    notify: bool


def _plan(
    reference_build,
    mouse_run=False,
    with_mutect2=False,
    with_varscan=False,
    with_somaticsniper=False,
    region_filter=False,
    rna=False,
    with_seq2hla=False,
    with_optitype_rna=False,
    with_optitype_normal=False,
    with_optitype_tumor=False,
    with_mhc_alleles=False,
    notify=False,
):
    callers = (with_mutect2, with_varscan, with_somaticsniper)
    optional_callers = tuple(name for name, on in zip(OPTIONAL_CALLERS, callers) if on)
    if rna:
        rna_typing = rna_hla_typing(reference_build, with_seq2hla, with_optitype_rna)
    else:
        rna_typing = NO_RNA_HLA_TYPING
    dna_optitype = tuple(
        name
        for name, on in zip(("Normal", "Tumor"), (with_optitype_normal, with_optitype_tumor))
        if on
    )
    source = resolve_allele_source(
        mhc_alleles=() if with_mhc_alleles else None,
        seq2hla=True if rna_typing.seq2hla else None,
        optitype=resolve_optitype(
            normal=True if with_optitype_normal else None,
            tumor=True if with_optitype_tumor else None,
            rna=True if rna_typing.optitype else None,
        ),
    )
    allele_source = None if source is None else source.kind
    return BranchPlan(
        mouse_run=mouse_run,
        optional_callers=optional_callers,
        region_filter=region_filter,
        rna=rna,
        rna_hla_typing=rna_typing,
        dna_optitype=dna_optitype,
        allele_source=allele_source,
        vaxrank=rna and allele_source is not None,
        annotate_vcfs=reference_build in ANNOTATED_BUILDS,
        notify=notify,
    )


def plan_branches(params: Parameters) -> BranchPlan:
    """Return the branch plan for ``params``"""
    plan = _plan(
        params.reference_build,
        mouse_run=params.mouse_run,
        with_mutect2=params.with_mutect2,
        with_varscan=params.with_varscan,
        with_somaticsniper=params.with_somaticsniper,
        region_filter=params.bedfile is not None,
        rna=params.rna_inputs is not None,
        with_seq2hla=params.with_seq2hla,
        with_optitype_rna=params.with_optitype_rna,
        with_optitype_normal=params.with_optitype_normal,
        with_optitype_tumor=params.with_optitype_tumor,
        with_mhc_alleles=params.mhc_alleles is not None,
        notify=params.email_options is not None,
    )
    logger.debug("Branch plan: %s", plan)
    return plan


#: Flags of ``_plan`` that are enumerated by ``iter_branch_plans``
_FLAGS = (
    "mouse_run",
    "with_mutect2",
    "with_varscan",
    "with_somaticsniper",
    "region_filter",
    "rna",
    "with_seq2hla",
    "with_optitype_rna",
    "with_optitype_normal",
    "with_optitype_tumor",
    "with_mhc_alleles",
    "notify",
)


def iter_branch_plans(
    reference_builds: typing.Iterable[str] = ("b37", "hg38", "mm10"),
) -> typing.Iterator[BranchPlan]:
    """Yield every distinct branch plan reachable for the given reference builds"""
    seen = set()
    for reference_build in reference_builds:
        for values in itertools.product((False, True), repeat=len(_FLAGS)):
            plan = _plan(reference_build, **dict(zip(_FLAGS, values)))
            if plan not in seen:
                seen.add(plan)
                yield plan
