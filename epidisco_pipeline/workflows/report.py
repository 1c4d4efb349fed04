# -*- coding: utf-8 -*-
"""Assembly of the vaccine peptide prediction, the final report and the notification emails"""

from logzero import logger

from epidisco_pipeline.models.tools import VAXRANK_CONFIG, VAXRANK_PREDICTOR


def vaxrank(semantics, somatic_vcfs, rna_results, alleles):
    """Return the saved Vaxrank node, ``None`` without RNA results or MHC alleles"""
    if rna_results is None or alleles is None:
        logger.debug("No RNA or no MHC alleles, skipping Vaxrank")
        return None
    return semantics.save(
        "Vaxrank",
        semantics.vaxrank(
            somatic_vcfs, rna_results.rna_bam, VAXRANK_PREDICTOR, alleles, VAXRANK_CONFIG
        ),
    )


def displayed_vcfs(semantics, results, annotate):
    """Return ``(name, node)`` pairs of the saved VCFs shown in the report

    If ``annotate`` then the VCFs are annotated with PolyPhen first.
    """
    if annotate:
        return [
            (name, semantics.save("VCF-annotated-" + name, semantics.vcf_annotate_polyphen(vcf)))
            for name, _, vcf in results
        ]
    else:
        return [(name, semantics.save("vcf-" + name, vcf)) for name, _, vcf in results]


def emails(semantics, email_options, flagstats, fastqcs):
    """Return the notification email nodes, none if ``email_options`` is not given

    ``flagstats`` and ``fastqcs`` are ``(normal, tumor, rna)`` triples, ``rna`` may be ``None``.
    """
    if email_options is None:
        return []
    normal_flagstat, tumor_flagstat, rna_flagstat = flagstats
    normal_fastqc, tumor_fastqc, rna_fastqc = fastqcs
    return [
        semantics.flagstat_email(normal_flagstat, tumor_flagstat, email_options, rna=rna_flagstat),
        semantics.fastqc_email(normal_fastqc, tumor_fastqc, email_options, rna=rna_fastqc),
    ]


def observables(semantics, report, notifications):
    """Return the terminal node waiting for the report and all notifications"""
    nodes = [report] + [semantics.to_unit(email) for email in notifications]
    return semantics.observe(semantics.to_unit(semantics.list(nodes)))
