# -*- coding: utf-8 -*-
"""Interface between the pipeline composition code and an execution backend

The pipeline code in :mod:`epidisco_pipeline.workflows` never runs anything.  It calls the node
constructors of a :class:`BaseSemantics` implementation, each of which takes node handles and
configuration records and returns a new node handle.  What a handle is (a job description, a
workflow engine object, or the plain record of :mod:`epidisco_pipeline.semantics.recorder`) is up
to the backend.
"""


class ImplementationUnavailableError(NotImplementedError):
    """Raised when a backend does not provide an operation

    This is provided as an alternative to ``NotImplementedError`` as the Python linters warn if
    a class does not override functions throwing ``NotImplementedError``.
    """


class BaseSemantics:
    """Capability set an execution backend has to provide

    Node constructors must not raise; failures are handled when the graph is executed.
    """

    #: Name of the backend
    name = "<base semantics>"

    def _unavailable(self, operation):
        raise ImplementationUnavailableError(
            "Operation '%s' not available in backend '%s'" % (operation, self.name)
        )

    # Inputs --------------------------------------------------------------------------------------

    def input_url(self, url):
        """Return node for a file given by path or URL"""
        self._unavailable("input_url")

    def fastq(self, sample_name, r1, r2=None, fragment_id=None):
        """Return FASTQ input node (paired if ``r2`` is given)"""
        self._unavailable("fastq")

    def bam(self, path, sample_name, reference_build, sorting=None):
        """Return BAM input node"""
        self._unavailable("bam")

    def bam_to_fastq(self, bam, sample_type, fragment_id=None):
        """Convert BAM back to single-end (``"SE"``) or paired-end (``"PE"``) FASTQ"""
        self._unavailable("bam_to_fastq")

    def bed(self, file):
        """Return BED node for a file node"""
        self._unavailable("bed")

    # Structure -----------------------------------------------------------------------------------

    def list(self, items):
        self._unavailable("list")

    def list_map(self, items, function):
        """Apply Python callable ``function`` (node to node) to each element of list node"""
        self._unavailable("list_map")

    def pair(self, first, second):
        self._unavailable("pair")

    def pair_first(self, pair):
        self._unavailable("pair_first")

    def pair_second(self, pair):
        self._unavailable("pair_second")

    def save(self, name, node):
        """Persist ``node`` under the stable ``name``, returns node of the same kind"""
        self._unavailable("save")

    def to_unit(self, node):
        """Synchronize on ``node`` and discard its value"""
        self._unavailable("to_unit")

    def observe(self, node):
        """Return the observable root of the graph ending in ``node``"""
        self._unavailable("observe")

    # Reads and alignments ------------------------------------------------------------------------

    def concat(self, fastqs):
        self._unavailable("concat")

    def fastqc(self, fastq):
        self._unavailable("fastqc")

    def bwa_mem_opt(self, input, reference_build, configuration=None):
        self._unavailable("bwa_mem_opt")

    def star(self, fastq, reference_build, configuration):
        self._unavailable("star")

    def merge_bams(self, bams):
        self._unavailable("merge_bams")

    def picard_mark_duplicates(self, bam, configuration):
        self._unavailable("picard_mark_duplicates")

    def gatk_indel_realigner(self, bam, configuration):
        self._unavailable("gatk_indel_realigner")

    def gatk_indel_realigner_joint(self, bam_pair, configuration):
        """Realign normal and tumor BAM together, returns a pair of BAMs"""
        self._unavailable("gatk_indel_realigner_joint")

    def gatk_bqsr(self, bam):
        self._unavailable("gatk_bqsr")

    def flagstat(self, bam):
        self._unavailable("flagstat")

    def stringtie(self, bam):
        self._unavailable("stringtie")

    # Variant calling -----------------------------------------------------------------------------

    def strelka(self, normal, tumor, configuration):
        self._unavailable("strelka")

    def mutect(self, normal, tumor, configuration):
        self._unavailable("mutect")

    def mutect2(self, normal, tumor):
        self._unavailable("mutect2")

    def varscan_somatic(self, normal, tumor):
        self._unavailable("varscan_somatic")

    def somaticsniper(self, normal, tumor):
        self._unavailable("somaticsniper")

    def gatk_haplotype_caller(self, bam):
        self._unavailable("gatk_haplotype_caller")

    def filter_to_region(self, vcf, bed):
        self._unavailable("filter_to_region")

    def vcf_annotate_polyphen(self, vcf):
        self._unavailable("vcf_annotate_polyphen")

    # HLA typing and epitopes ---------------------------------------------------------------------

    def seq2hla(self, fastq):
        self._unavailable("seq2hla")

    def optitype(self, input_type, fastq):
        """Run OptiType on ``"DNA"`` or ``"RNA"`` reads"""
        self._unavailable("optitype")

    def hlarp(self, source, result):
        """Convert Seq2HLA or OptiType ``result`` into MHC alleles"""
        self._unavailable("hlarp")

    def mhc_alleles(self, names):
        """Return MHC alleles node for explicitly given allele names"""
        self._unavailable("mhc_alleles")

    def vaxrank(self, vcfs, bam, predictor, alleles, configuration):
        self._unavailable("vaxrank")

    # Reporting -----------------------------------------------------------------------------------

    def report(self, run_name, **kwargs):
        """Build the final report; optional artifacts that are ``None`` are omitted"""
        self._unavailable("report")

    def flagstat_email(self, normal, tumor, email_options, rna=None):
        self._unavailable("flagstat_email")

    def fastqc_email(self, normal, tumor, email_options, rna=None):
        self._unavailable("fastqc_email")
