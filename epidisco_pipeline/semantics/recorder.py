# -*- coding: utf-8 -*-
"""Backend that records the pipeline as a graph of :class:`TaskNode` objects

Nothing is executed.  Equal calls yield equal nodes, so building the pipeline twice from the same
parameters yields equal graphs.
"""

from epidisco_pipeline.semantics import BaseSemantics
from epidisco_pipeline.semantics.graph import OutputKind, TaskGraph, TaskNode


def _node(operation, kind, inputs=(), config=()):
    return TaskNode(
        operation=operation,
        kind=OutputKind(kind),
        inputs=tuple((label, value) for label, value in inputs if value is not None),
        config=tuple((key, value) for key, value in config if value is not None),
    )


class GraphRecorder(BaseSemantics):
    """Record node constructors as :class:`TaskNode` objects"""

    name = "recorder"

    # Inputs --------------------------------------------------------------------------------------

    def input_url(self, url):
        return _node("input_url", OutputKind.FILE, config=[("url", url)])

    def fastq(self, sample_name, r1, r2=None, fragment_id=None):
        return _node(
            "fastq",
            OutputKind.FASTQ,
            inputs=[("r1", r1), ("r2", r2)],
            config=[("sample_name", sample_name), ("fragment_id", fragment_id)],
        )

    def bam(self, path, sample_name, reference_build, sorting=None):
        return _node(
            "bam",
            OutputKind.BAM,
            inputs=[("path", path)],
            config=[
                ("sample_name", sample_name),
                ("reference_build", reference_build),
                ("sorting", sorting),
            ],
        )

    def bam_to_fastq(self, bam, sample_type, fragment_id=None):
        return _node(
            "bam_to_fastq",
            OutputKind.FASTQ,
            inputs=[("bam", bam)],
            config=[("sample_type", sample_type), ("fragment_id", fragment_id)],
        )

    def bed(self, file):
        return _node("bed", OutputKind.BED, inputs=[("file", file)])

    # Structure -----------------------------------------------------------------------------------

    def list(self, items):
        items = tuple(items)
        element = items[0].kind if items else None
        return _node(
            "list", OutputKind.LIST, inputs=[("items", items)], config=[("element", element)]
        )

    def list_map(self, items, function):
        element = items.setting("element") or OutputKind.UNIT
        variable = _node("variable", element, inputs=[("of", items)])
        body = function(variable)
        return _node(
            "list_map",
            OutputKind.LIST,
            inputs=[("list", items), ("function", body)],
            config=[("element", body.kind)],
        )

    def pair(self, first, second):
        return _node(
            "pair",
            OutputKind.PAIR,
            inputs=[("first", first), ("second", second)],
            config=[("first", first.kind), ("second", second.kind)],
        )

    def pair_first(self, pair):
        return _node("pair_first", pair.setting("first"), inputs=[("pair", pair)])

    def pair_second(self, pair):
        return _node("pair_second", pair.setting("second"), inputs=[("pair", pair)])

    def save(self, name, node):
        return _node("save", node.kind, inputs=[("node", node)], config=[("name", name)])

    def to_unit(self, node):
        return _node("to_unit", OutputKind.UNIT, inputs=[("node", node)])

    def observe(self, node):
        return TaskGraph(node)

    # Reads and alignments ------------------------------------------------------------------------

    def concat(self, fastqs):
        return _node("concat", OutputKind.FASTQ, inputs=[("fastqs", fastqs)])

    def fastqc(self, fastq):
        return _node("fastqc", OutputKind.FASTQC, inputs=[("fastq", fastq)])

    def bwa_mem_opt(self, input, reference_build, configuration=None):
        return _node(
            "bwa_mem_opt",
            OutputKind.BAM,
            inputs=[("input", input)],
            config=[("reference_build", reference_build), ("configuration", configuration)],
        )

    def star(self, fastq, reference_build, configuration):
        return _node(
            "star",
            OutputKind.BAM,
            inputs=[("fastq", fastq)],
            config=[("reference_build", reference_build), ("configuration", configuration)],
        )

    def merge_bams(self, bams):
        return _node("merge_bams", OutputKind.BAM, inputs=[("bams", bams)])

    def picard_mark_duplicates(self, bam, configuration):
        return _node(
            "picard_mark_duplicates",
            OutputKind.BAM,
            inputs=[("bam", bam)],
            config=[("configuration", configuration)],
        )

    def gatk_indel_realigner(self, bam, configuration):
        return _node(
            "gatk_indel_realigner",
            OutputKind.BAM,
            inputs=[("bam", bam)],
            config=[("configuration", configuration)],
        )

    def gatk_indel_realigner_joint(self, bam_pair, configuration):
        return _node(
            "gatk_indel_realigner_joint",
            OutputKind.PAIR,
            inputs=[("pair", bam_pair)],
            config=[
                ("first", OutputKind.BAM),
                ("second", OutputKind.BAM),
                ("configuration", configuration),
            ],
        )

    def gatk_bqsr(self, bam):
        return _node("gatk_bqsr", OutputKind.BAM, inputs=[("bam", bam)])

    def flagstat(self, bam):
        return _node("flagstat", OutputKind.FLAGSTAT, inputs=[("bam", bam)])

    def stringtie(self, bam):
        return _node("stringtie", OutputKind.GTF, inputs=[("bam", bam)])

    # Variant calling -----------------------------------------------------------------------------

    def _somatic(self, operation, normal, tumor, configuration=None):
        return _node(
            operation,
            OutputKind.VCF,
            inputs=[("normal", normal), ("tumor", tumor)],
            config=[("configuration", configuration)],
        )

    def strelka(self, normal, tumor, configuration):
        return self._somatic("strelka", normal, tumor, configuration)

    def mutect(self, normal, tumor, configuration):
        return self._somatic("mutect", normal, tumor, configuration)

    def mutect2(self, normal, tumor):
        return self._somatic("mutect2", normal, tumor)

    def varscan_somatic(self, normal, tumor):
        return self._somatic("varscan_somatic", normal, tumor)

    def somaticsniper(self, normal, tumor):
        return self._somatic("somaticsniper", normal, tumor)

    def gatk_haplotype_caller(self, bam):
        return _node("gatk_haplotype_caller", OutputKind.VCF, inputs=[("bam", bam)])

    def filter_to_region(self, vcf, bed):
        return _node("filter_to_region", OutputKind.VCF, inputs=[("vcf", vcf), ("bed", bed)])

    def vcf_annotate_polyphen(self, vcf):
        return _node("vcf_annotate_polyphen", OutputKind.VCF, inputs=[("vcf", vcf)])

    # HLA typing and epitopes ---------------------------------------------------------------------

    def seq2hla(self, fastq):
        return _node("seq2hla", OutputKind.SEQ2HLA_RESULT, inputs=[("fastq", fastq)])

    def optitype(self, input_type, fastq):
        return _node(
            "optitype",
            OutputKind.OPTITYPE_RESULT,
            inputs=[("fastq", fastq)],
            config=[("input_type", input_type)],
        )

    def hlarp(self, source, result):
        return _node(
            "hlarp",
            OutputKind.MHC_ALLELES,
            inputs=[("result", result)],
            config=[("source", source)],
        )

    def mhc_alleles(self, names):
        return _node("mhc_alleles", OutputKind.MHC_ALLELES, config=[("names", tuple(names))])

    def vaxrank(self, vcfs, bam, predictor, alleles, configuration):
        return _node(
            "vaxrank",
            OutputKind.VAXRANK,
            inputs=[("vcfs", tuple(vcfs)), ("bam", bam), ("alleles", alleles)],
            config=[("predictor", predictor), ("configuration", configuration)],
        )

    # Reporting -----------------------------------------------------------------------------------

    def report(self, run_name, **kwargs):
        vcfs = kwargs.pop("vcfs", ())
        inputs = [("vcfs", tuple(vcf for _, vcf in vcfs))]
        config = [("run_name", run_name), ("vcf_names", tuple(name for name, _ in vcfs))]
        for key, value in kwargs.items():
            if isinstance(value, TaskNode):
                inputs.append((key, value))
            elif key == "metadata":
                config.append((key, tuple(tuple(entry) for entry in value)))
            else:
                config.append((key, value))
        return _node("report", OutputKind.REPORT, inputs=inputs, config=config)

    def flagstat_email(self, normal, tumor, email_options, rna=None):
        return _node(
            "flagstat_email",
            OutputKind.EMAIL,
            inputs=[("normal", normal), ("tumor", tumor), ("rna", rna)],
            config=[("email_options", email_options)],
        )

    def fastqc_email(self, normal, tumor, email_options, rna=None):
        return _node(
            "fastqc_email",
            OutputKind.EMAIL,
            inputs=[("normal", normal), ("tumor", tumor), ("rna", rna)],
            config=[("email_options", email_options)],
        )
