# -*- coding: utf-8 -*-
"""Assembly of the complete pipeline from :class:`~epidisco_pipeline.models.parameters.Parameters`

Starting from the normal, tumor and (optional) RNA reads, the pipeline

- aligns the DNA samples with BWA-MEM, realigns normal and tumor jointly and recalibrates
  base qualities,
- calls variants with Strelka, Mutect, the HaplotypeCaller and optional further callers,
- aligns the RNA samples with STAR, assembles transcripts with StringTie and types HLA alleles,
- predicts vaccine peptides with Vaxrank if there are RNA reads and MHC alleles,
- runs FastQC and builds the final report and the notification emails.

Usage::

    from epidisco_pipeline.workflows.pipeline import run

    graph = run(parameters)  # records into a TaskGraph by default
"""

from logzero import logger

from epidisco_pipeline.models.parameters import Parameters, construct_run_name, metadata
from epidisco_pipeline.semantics.recorder import GraphRecorder
from epidisco_pipeline.workflows.aggregation import concat_samples, qc, to_bam
from epidisco_pipeline.workflows.alignment import final_bams, rna_pipeline
from epidisco_pipeline.workflows.branches import plan_branches
from epidisco_pipeline.workflows.hla_typing import (
    alleles_node,
    optitype_hla,
    resolve_allele_source,
    resolve_optitype,
)
from epidisco_pipeline.workflows.library import fastq_of_input
from epidisco_pipeline.workflows.report import displayed_vcfs, emails, observables, vaxrank
from epidisco_pipeline.workflows.variant_calling import somatic_vcfs, vcfs


class EpidiscoPipeline:
    """Build the pipeline for one set of parameters with the given semantics"""

    def __init__(self, semantics, parameters: Parameters):
        #: The backend to build nodes with
        self.semantics = semantics
        #: The run parameters
        self.parameters = parameters
        #: All flag-dependent decisions
        self.plan = plan_branches(parameters)

    def _saved_bams(self):
        bfx = self.semantics
        params = self.parameters
        normal, tumor = final_bams(
            bfx,
            normal=to_bam(
                bfx, params.normal_inputs, params.reference_build, params.picard_java_max_heap
            ),
            tumor=to_bam(
                bfx, params.tumor_inputs, params.reference_build, params.picard_java_max_heap
            ),
        )
        return bfx.save("normal-bam", normal), bfx.save("tumor-bam", tumor)

    def _fastqs(self, samples):
        return [fastq_of_input(self.semantics, sample) for sample in samples]

    def run(self):
        """Return the observable root of the pipeline"""
        bfx = self.semantics
        params = self.parameters
        plan = self.plan
        run_name = construct_run_name(params)
        logger.info("Building pipeline for run %s", run_name)

        normal_bam, tumor_bam = self._saved_bams()
        normal_bam_flagstat = bfx.save("normal-bam-flagstat", bfx.flagstat(normal_bam))
        tumor_bam_flagstat = bfx.save("tumor-bam-flagstat", bfx.flagstat(tumor_bam))

        variants = vcfs(
            bfx,
            mouse_run=plan.mouse_run,
            bedfile=params.bedfile,
            with_mutect2="mutect2" in plan.optional_callers,
            with_varscan="varscan" in plan.optional_callers,
            with_somaticsniper="somatic-sniper" in plan.optional_callers,
            reference_build=params.reference_build,
            normal=normal_bam,
            tumor=tumor_bam,
        )

        rna = self._fastqs(params.rna_inputs) if plan.rna else None
        if rna is None:
            rna_results = None
        else:
            rna_results = rna_pipeline(
                bfx,
                rna,
                params.reference_build,
                plan.rna_hla_typing,
                params.picard_java_max_heap,
            )

        # Reads of all normal (tumor) samples, one FASTQ per sample, for HLA typing and QC
        normal = concat_samples(bfx, self._fastqs(params.normal_inputs))
        tumor = concat_samples(bfx, self._fastqs(params.tumor_inputs))
        optitype_normal = optitype_tumor = optitype_rna = seq2hla = None
        if "Normal" in plan.dna_optitype:
            optitype_normal = optitype_hla(bfx, normal, "DNA", "Normal")
        if "Tumor" in plan.dna_optitype:
            optitype_tumor = optitype_hla(bfx, tumor, "DNA", "Tumor")
        if rna_results is not None:
            optitype_rna = rna_results.optitype_rna
            seq2hla = rna_results.seq2hla
        source = resolve_allele_source(
            mhc_alleles=params.mhc_alleles,
            seq2hla=seq2hla,
            optitype=resolve_optitype(optitype_normal, optitype_tumor, optitype_rna),
        )
        alleles = alleles_node(bfx, source)
        vaxrank_result = vaxrank(bfx, somatic_vcfs(variants), rna_results, alleles)

        fastqc_normal = bfx.save("QC:normal", qc(bfx, normal))
        fastqc_tumor = bfx.save("QC:tumor", qc(bfx, tumor))
        if rna is None:
            fastqc_rna = None
        else:
            fastqc_rna = bfx.save("QC:rna", qc(bfx, concat_samples(bfx, rna)))

        rna_bam_flagstat = rna_results.rna_bam_flagstat if rna_results is not None else None
        notifications = emails(
            bfx,
            params.email_options if plan.notify else None,
            (normal_bam_flagstat, tumor_bam_flagstat, rna_bam_flagstat),
            (fastqc_normal, fastqc_tumor, fastqc_rna),
        )

        report = bfx.report(
            run_name,
            igv_url_server_prefix=params.igv_url_server_prefix,
            vcfs=displayed_vcfs(bfx, variants, plan.annotate_vcfs),
            bedfile=params.bedfile,
            fastqc_normal=fastqc_normal,
            fastqc_tumor=fastqc_tumor,
            fastqc_rna=fastqc_rna,
            normal_bam=normal_bam,
            tumor_bam=tumor_bam,
            rna_bam=rna_results.rna_bam if rna_results is not None else None,
            normal_bam_flagstat=normal_bam_flagstat,
            tumor_bam_flagstat=tumor_bam_flagstat,
            optitype_normal=optitype_normal,
            optitype_tumor=optitype_tumor,
            optitype_rna=optitype_rna,
            vaxrank=vaxrank_result,
            seq2hla=seq2hla,
            stringtie=rna_results.stringtie if rna_results is not None else None,
            rna_bam_flagstat=rna_bam_flagstat,
            metadata=metadata(params),
        )
        return observables(bfx, report, notifications)


def run(parameters: Parameters, semantics=None):
    """Build the pipeline for ``parameters``

    Uses a fresh :class:`~epidisco_pipeline.semantics.recorder.GraphRecorder` unless
    ``semantics`` is given, in which case the value returned by its ``observe()`` is returned.
    """
    if semantics is None:
        semantics = GraphRecorder()
    return EpidiscoPipeline(semantics, parameters).run()
