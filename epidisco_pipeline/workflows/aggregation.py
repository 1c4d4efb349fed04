# -*- coding: utf-8 -*-
"""Aggregation of per-sample inputs into concatenated reads and merged alignments"""

from logzero import logger

from epidisco_pipeline.models.tools import mark_dups_config
from epidisco_pipeline.workflows.library import bwa_mem_opt_inputs


def concat_samples(semantics, samples):
    """Concatenate the fragments of each sample, one FASTQ node per sample

    ``samples`` is a list of FASTQ list nodes as returned by
    :func:`~epidisco_pipeline.workflows.library.fastq_of_input`.  The result is a list node in
    the order of ``samples``.
    """
    return semantics.list_map(semantics.list(samples), lambda fastqs: semantics.concat(fastqs))


def qc(semantics, fastqs):
    """Run FastQC on all reads of ``fastqs`` concatenated"""
    return semantics.fastqc(semantics.concat(fastqs))


def to_bam(semantics, samples, reference_build, picard_java_max_heap=None):
    """Align DNA samples with BWA-MEM and merge everything into one BAM

    Each fragment is aligned on its own, the fragment BAMs are merged and duplicates are marked
    per sample.  The sample BAMs are merged afterwards.
    """
    logger.debug("Aligning %d DNA sample(s) against %s", len(samples), reference_build)
    configuration = mark_dups_config(picard_java_max_heap)

    def sample_to_bam(sample):
        bams = [
            semantics.bwa_mem_opt(input, reference_build)
            for input in bwa_mem_opt_inputs(semantics, sample)
        ]
        return semantics.picard_mark_duplicates(
            semantics.merge_bams(semantics.list(bams)), configuration
        )

    return semantics.merge_bams(semantics.list([sample_to_bam(sample) for sample in samples]))
