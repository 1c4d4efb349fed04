# -*- coding: utf-8 -*-
"""Fan-out of the final normal and tumor BAM to the variant callers

Strelka and Mutect are always run, as is the GATK HaplotypeCaller on normal and tumor.  The
HaplotypeCaller results are germline calls and thus not used for epitope prediction.  MuTect2,
VarScan and SomaticSniper are optional.
"""

import typing

import attr
from logzero import logger

from epidisco_pipeline.models.tools import STRELKA_CONFIG, mutect_config


@attr.s(frozen=True, auto_attribs=True)
class VariantCallResult:
    """Result of one variant caller"""

    #: Name of the caller, used for naming the persisted VCF
    name: str
    #: Whether the calls are somatic
    somatic: bool
    #: The VCF node
    vcf: typing.Any

    def __iter__(self):
        return iter((self.name, self.somatic, self.vcf))


def vcfs(
    semantics,
    mouse_run,
    bedfile,
    with_mutect2,
    with_varscan,
    with_somaticsniper,
    reference_build,
    normal,
    tumor,
):
    """Return list of :class:`VariantCallResult` for the BAM nodes ``normal`` and ``tumor``

    The fixed callers come first, followed by the optional ones in the order MuTect2, VarScan,
    SomaticSniper.  If ``bedfile`` is given then all calls are restricted to its regions.
    """
    _ = reference_build
    results = [
        VariantCallResult("strelka", True, semantics.strelka(normal, tumor, STRELKA_CONFIG)),
        VariantCallResult(
            "mutect", True, semantics.mutect(normal, tumor, mutect_config(mouse_run))
        ),
        VariantCallResult("haplo-normal", False, semantics.gatk_haplotype_caller(normal)),
        VariantCallResult("haplo-tumor", False, semantics.gatk_haplotype_caller(tumor)),
    ]
    optional = (
        (with_mutect2, "mutect2", semantics.mutect2),
        (with_varscan, "varscan", semantics.varscan_somatic),
        (with_somaticsniper, "somatic-sniper", semantics.somaticsniper),
    )
    for enabled, name, caller in optional:
        if enabled:
            results.append(VariantCallResult(name, True, caller(normal, tumor)))
    logger.debug("Variant callers: %s", ", ".join(result.name for result in results))
    if bedfile is None:
        return results
    bed = semantics.bed(semantics.input_url(bedfile))
    return [
        VariantCallResult(name, somatic, semantics.filter_to_region(vcf, bed))
        for name, somatic, vcf in results
    ]


def somatic_vcfs(results: typing.Iterable[VariantCallResult]) -> list:
    """Return the VCF nodes of the somatic calls in ``results``"""
    return [result.vcf for result in results if result.somatic]
