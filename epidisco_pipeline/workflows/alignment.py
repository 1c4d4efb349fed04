# -*- coding: utf-8 -*-
"""Realignment and recalibration of DNA alignments and the RNA branch"""

import typing

import attr
from logzero import logger

from epidisco_pipeline.models.tools import INDEL_REALIGNER_CONFIG, STAR_CONFIG, mark_dups_config
from epidisco_pipeline.workflows.aggregation import concat_samples
from epidisco_pipeline.workflows.hla_typing import optitype_hla, seq2hla_hla


def final_bams(semantics, normal, tumor):
    """Realign normal and tumor BAM jointly, then recalibrate each on its own

    Returns the pair ``(normal, tumor)`` of final BAM nodes.
    """
    pair = semantics.gatk_indel_realigner_joint(
        semantics.pair(normal, tumor), INDEL_REALIGNER_CONFIG
    )
    return (
        semantics.gatk_bqsr(semantics.pair_first(pair)),
        semantics.gatk_bqsr(semantics.pair_second(pair)),
    )


def rna_bam(semantics, samples, reference_build, picard_java_max_heap=None):
    """Align RNA samples with STAR and merge everything into one BAM

    ``samples`` are FASTQ list nodes.  Per sample, each fragment is aligned on its own, the
    fragment BAMs are merged, duplicates are marked and indels are realigned.  There is no base
    quality recalibration for RNA.
    """
    configuration = mark_dups_config(picard_java_max_heap)

    def sample_to_bam(sample):
        bams = semantics.list_map(
            sample, lambda fastq: semantics.star(fastq, reference_build, STAR_CONFIG)
        )
        deduplicated = semantics.picard_mark_duplicates(semantics.merge_bams(bams), configuration)
        return semantics.gatk_indel_realigner(deduplicated, INDEL_REALIGNER_CONFIG)

    return semantics.merge_bams(semantics.list([sample_to_bam(sample) for sample in samples]))


@attr.s(frozen=True, auto_attribs=True)
class RnaResults:
    """Results of the RNA branch"""

    #: Merged RNA alignment
    rna_bam: typing.Any
    #: Transcript assembly of ``rna_bam``
    stringtie: typing.Any
    #: Flagstat of ``rna_bam``
    rna_bam_flagstat: typing.Any
    #: Seq2HLA result, if run
    seq2hla: typing.Any = None
    #: OptiType result on the RNA reads, if run
    optitype_rna: typing.Any = None


def rna_pipeline(semantics, samples, reference_build, hla_typing, picard_java_max_heap=None):
    """Build the RNA branch for the FASTQ list nodes ``samples``

    ``hla_typing`` is the :class:`~epidisco_pipeline.workflows.branches.RnaHlaTyping` to
    perform.
    """
    logger.debug("Building RNA branch for %d sample(s)", len(samples))
    bam = rna_bam(semantics, samples, reference_build, picard_java_max_heap)
    fastqs = concat_samples(semantics, samples)
    seq2hla = seq2hla_hla(semantics, fastqs) if hla_typing.seq2hla else None
    optitype_rna = optitype_hla(semantics, fastqs, "RNA", "RNA") if hla_typing.optitype else None
    return RnaResults(
        rna_bam=semantics.save("rna-bam", bam),
        stringtie=semantics.save("stringtie", semantics.stringtie(bam)),
        rna_bam_flagstat=semantics.save("rna-bam-flagstat", semantics.flagstat(bam)),
        seq2hla=seq2hla,
        optitype_rna=optitype_rna,
    )
