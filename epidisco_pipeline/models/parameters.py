"""Parameters of one pipeline run"""

from typing import Annotated

from pydantic import Field

from epidisco_pipeline.models import EpidiscoModel, JavaHeapString
from epidisco_pipeline.models.inputs import SampleInput

#: Non-empty list of samples
Samples = Annotated[tuple[SampleInput, ...], Field(min_length=1)]


class EmailOptions(EpidiscoModel):
    from_email: Annotated[str, Field(examples=["pipeline@example.com"])]

    to_email: Annotated[str, Field(examples=["analyst@example.com"])]

    mailgun_domain: str

    mailgun_api_key: str


class Parameters(EpidiscoModel):
    experiment_name: str

    reference_build: Annotated[str, Field(examples=["b37", "hg19", "hg38", "mm10"])]

    normal_inputs: Samples

    tumor_inputs: Samples

    rna_inputs: Samples | None = None
    """RNA-seq samples of the tumor, the RNA branch is skipped if not given"""

    mhc_alleles: Annotated[tuple[str, ...], Field(min_length=1)] | None = None
    """MHC alleles which take precedence over those computed by HLA typing"""

    mouse_run: bool = False
    """Use mouse-specific tool configurations"""

    with_topiary: bool = False
    with_seq2hla: bool = False
    with_mutect2: bool = False
    with_varscan: bool = False
    with_somaticsniper: bool = False
    with_optitype_normal: bool = False
    with_optitype_tumor: bool = False
    with_optitype_rna: bool = False

    email_options: EmailOptions | None = None
    """Send flagstat and FastQC summaries by email when set"""

    bedfile: str | None = None
    """Restrict all variant calls to the regions of this BED file"""

    picard_java_max_heap: JavaHeapString | None = None

    igv_url_server_prefix: str | None = None


def construct_run_name(params: Parameters) -> str:
    """Return run name derived from the shape of the input (not its content)"""
    if params.rna_inputs is None:
        rnas = ""
    else:
        rnas = "%drnas" % len(params.rna_inputs)
    return "-".join(
        [
            params.experiment_name,
            "%dnormals" % len(params.normal_inputs),
            "%dtumors" % len(params.tumor_inputs),
            rnas,
            params.reference_build,
        ]
    )


def construct_run_directory(params: Parameters) -> str:
    """Return the run directory

    The directory only depends on the experiment name and the reference build so repeated runs
    share their intermediate results.
    """
    return "%s-%s" % (params.experiment_name, params.reference_build)


def _describe_samples(samples):
    return "".join(sample.describe() for sample in samples)


def metadata(params: Parameters) -> list[tuple[str, str]]:
    """Return ``(label, value)`` pairs summarizing the run for the report"""
    if params.mhc_alleles is None:
        alleles = "None provided"
    else:
        alleles = "Alleles: [%s]" % "; ".join(params.mhc_alleles)
    if params.rna_inputs is None:
        rna = "none"
    else:
        rna = _describe_samples(params.rna_inputs)
    return [
        ("MHC Alleles", alleles),
        ("Reference-build", params.reference_build),
        ("Normal-inputs", _describe_samples(params.normal_inputs)),
        ("Tumor-inputs", _describe_samples(params.tumor_inputs)),
        ("RNA-inputs", rna),
    ]
