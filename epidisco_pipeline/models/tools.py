"""Named configuration records for the external tools used by the pipeline

The records are handed to the execution backend unchanged; the composition code only chooses
which one to use.
"""

from epidisco_pipeline.models import EpidiscoModel, JavaHeapString


class GatkReadFilterConfiguration(EpidiscoModel):
    """Read filtering shared by the GATK ``IndelRealigner`` and ``RealignerTargetCreator``"""

    name: str

    filter_reads_with_n_cigar: bool = False
    """Drop reads containing ``N`` operators in their CIGAR string"""

    filter_mismatching_base_and_quals: bool = False
    """Drop reads whose base and quality arrays differ in length"""

    filter_bases_not_stored: bool = False
    """Drop reads without stored bases"""

    parameters: tuple[tuple[str, str], ...] = ()


class IndelRealignerConfiguration(EpidiscoModel):
    indel_realigner: GatkReadFilterConfiguration

    target_creator: GatkReadFilterConfiguration


class StarAlignConfiguration(EpidiscoModel):
    name: str

    sam_mapq_unique: int | None = None
    """MAPQ written for uniquely mapped reads instead of STAR's 255"""

    overhang_length: int | None = None

    parameters: tuple[tuple[str, str], ...] = ()


class VaxrankConfiguration(EpidiscoModel):
    name: str = "default"

    vaccine_peptide_length: int = 25
    padding_around_mutation: int = 0
    max_vaccine_peptides_per_mutation: int = 1
    max_mutations_in_report: int = 10
    min_mapping_quality: int = 1
    min_variant_sequence_coverage: int = 1
    min_alt_rna_reads: int = 2
    include_mismatches_after_variant: bool = False
    use_duplicate_reads: bool = False
    drop_secondary_alignments: bool = False
    mhc_epitope_lengths: tuple[int, ...] = (8, 9, 10, 11)


class StrelkaConfiguration(EpidiscoModel):
    name: str

    is_exome: bool = False

    parameters: tuple[tuple[str, str], ...] = ()


class MutectConfiguration(EpidiscoModel):
    name: str

    with_cosmic: bool = True
    """Use COSMIC as prior for somatic mutations (not available for mouse)"""

    with_dbsnp: bool = True

    parameters: tuple[tuple[str, str], ...] = ()


class MarkDuplicatesConfiguration(EpidiscoModel):
    name: str = "default"

    mem_param: JavaHeapString | None = None
    """Maximal Java heap for Picard"""


def _ignore_mismatch_filter():
    return GatkReadFilterConfiguration(
        name="ignore-mismatch",
        filter_reads_with_n_cigar=True,
        filter_mismatching_base_and_quals=True,
        filter_bases_not_stored=True,
    )


#: BWA may emit reads without qualities that GATK's realigner refuses to process (even if the
#: reads are unmapped), so both realignment tools skip malformed reads instead of aborting.
INDEL_REALIGNER_CONFIG = IndelRealignerConfiguration(
    indel_realigner=_ignore_mismatch_filter(),
    target_creator=_ignore_mismatch_filter(),
)

#: STAR reports unique alignments with MAPQ 255 ("unknown" for GATK); write 60 instead.
STAR_CONFIG = StarAlignConfiguration(name="mapq_default_60", sam_mapq_unique=60)

VAXRANK_CONFIG = VaxrankConfiguration(
    name="PGV-configuration",
    padding_around_mutation=5,
    max_vaccine_peptides_per_mutation=3,
    max_mutations_in_report=20,
)

STRELKA_CONFIG = StrelkaConfiguration(name="exome-default", is_exome=True)

MUTECT_CONFIG = MutectConfiguration(name="default")

#: Mouse references come without COSMIC
MUTECT_CONFIG_MOUSE = MutectConfiguration(name="default-without-cosmic", with_cosmic=False)

#: Epitope predictor used for vaccine peptide ranking
VAXRANK_PREDICTOR = "NetMHCcons"


def mark_dups_config(heap: str | None = None) -> MarkDuplicatesConfiguration:
    """Return the MarkDuplicates profile for the given Java heap"""
    return MarkDuplicatesConfiguration(name="picard-with-heap", mem_param=heap)


def mutect_config(mouse_run: bool) -> MutectConfiguration:
    """Return the Mutect profile for a mouse or non-mouse run"""
    return MUTECT_CONFIG_MOUSE if mouse_run else MUTECT_CONFIG
