# -*- coding: utf-8 -*-
"""Turn :class:`~epidisco_pipeline.models.inputs.SampleInput` objects into input nodes"""

from epidisco_pipeline.models.inputs import BAM_FRAGMENTS, PairedEndFastq, SampleInput
from epidisco_pipeline.utils import listify


def _fastq_of_fastq_fragment(semantics, sample_name, fragment):
    if isinstance(fragment, PairedEndFastq):
        return semantics.fastq(
            sample_name,
            semantics.input_url(fragment.r1),
            r2=semantics.input_url(fragment.r2),
            fragment_id=fragment.fragment_id,
        )
    else:
        return semantics.fastq(
            sample_name, semantics.input_url(fragment.r), fragment_id=fragment.fragment_id
        )


def _bam_of_fragment(semantics, sample_name, fragment):
    return semantics.bam(
        semantics.input_url(fragment.path),
        sample_name,
        fragment.reference_build,
        sorting=fragment.sorting,
    )


@listify
def bwa_mem_opt_inputs(semantics, sample: SampleInput):
    """Yield one alignment-ready input node per fragment of ``sample``

    BAM-derived fragments are handed to the aligner as BAM files.
    """
    for fragment in sample.fragments:
        if isinstance(fragment, BAM_FRAGMENTS):
            yield _bam_of_fragment(semantics, sample.sample_name, fragment)
        else:
            yield _fastq_of_fastq_fragment(semantics, sample.sample_name, fragment)


@listify
def _fastqs_of_input(semantics, sample):
    for fragment in sample.fragments:
        if isinstance(fragment, BAM_FRAGMENTS):
            yield semantics.bam_to_fastq(
                _bam_of_fragment(semantics, sample.sample_name, fragment),
                fragment.sample_type,
                fragment_id=fragment.fragment_id,
            )
        else:
            yield _fastq_of_fastq_fragment(semantics, sample.sample_name, fragment)


def fastq_of_input(semantics, sample: SampleInput):
    """Return list node with one FASTQ node per fragment of ``sample``"""
    return semantics.list(_fastqs_of_input(semantics, sample))
