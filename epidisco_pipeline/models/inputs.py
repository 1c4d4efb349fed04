"""Sequencing inputs of one sample

A sample consists of one or more fragments (e.g., sequencing lanes).  Each fragment is either a
pair of FASTQ files, a single FASTQ file, or a BAM file that is converted back to single- or
paired-end reads.
"""

import typing
from typing import Annotated, Literal

from pydantic import Field

from epidisco_pipeline.models import EnumField, EpidiscoModel, Sorting


class PairedEndFastq(EpidiscoModel):
    kind: Literal["PE"] = "PE"

    #: Human readable kind of the fragment
    description: typing.ClassVar[str] = "Paired-end FASTQ"

    fragment_id: str | None = None

    r1: Annotated[str, Field(examples=["/path/to/sample_R1.fastq.gz"])]

    r2: Annotated[str, Field(examples=["/path/to/sample_R2.fastq.gz"])]


class SingleEndFastq(EpidiscoModel):
    kind: Literal["SE"] = "SE"

    description: typing.ClassVar[str] = "Single-end FASTQ"

    fragment_id: str | None = None

    r: Annotated[str, Field(examples=["/path/to/sample.fastq.gz"])]


class _BamFragment(EpidiscoModel):
    fragment_id: str | None = None

    path: Annotated[str, Field(examples=["/path/to/sample.bam"])]

    reference_build: str
    """Reference the BAM file was aligned against"""

    sorting: Annotated[Sorting | None, EnumField(Sorting, None)]


class SingleEndBam(_BamFragment):
    kind: Literal["bam_SE"] = "bam_SE"

    description: typing.ClassVar[str] = "Single-end-from-bam"

    #: Read layout handed to ``bam_to_fastq``
    sample_type: typing.ClassVar[str] = "SE"


class PairedEndBam(_BamFragment):
    kind: Literal["bam_PE"] = "bam_PE"

    description: typing.ClassVar[str] = "Paired-end-from-bam"

    sample_type: typing.ClassVar[str] = "PE"


Fragment = Annotated[
    PairedEndFastq | SingleEndFastq | SingleEndBam | PairedEndBam, Field(discriminator="kind")
]

#: Fragment types that are read from BAM files
BAM_FRAGMENTS = (SingleEndBam, PairedEndBam)


def same_kind(first: Fragment, second: Fragment) -> bool:
    """Return whether both fragments are of the same variant"""
    return type(first) is type(second)


class SampleInput(EpidiscoModel):
    sample_name: str

    fragments: Annotated[tuple[Fragment, ...], Field(min_length=1)]

    def describe(self) -> str:
        """Return human-readable digest of the sample, e.g., for the report"""
        first, *more = self.fragments
        if not more:
            return "%s, 1 fragment: %s" % (self.sample_name, first.description)
        if all(same_kind(fragment, first) for fragment in more):
            kinds = "all " + first.description
        else:
            kinds = "heterogeneous"
        return "%s, %d fragments: %s" % (self.sample_name, len(self.fragments), kinds)
