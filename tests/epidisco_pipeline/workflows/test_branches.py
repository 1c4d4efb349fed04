# -*- coding: utf-8 -*-
"""Tests for the branch plan"""

import pytest

from epidisco_pipeline.workflows.branches import (
    NO_RNA_HLA_TYPING,
    RnaHlaTyping,
    iter_branch_plans,
    plan_branches,
    rna_hla_typing,
)
from epidisco_pipeline.workflows.hla_typing import AlleleSourceKind

from ..conftest import make_parameters, pe_sample


@pytest.mark.parametrize("with_seq2hla", [False, True])
@pytest.mark.parametrize("with_optitype_rna", [False, True])
def test_rna_hla_typing_human(with_seq2hla, with_optitype_rna):
    expected = RnaHlaTyping(seq2hla=with_seq2hla, optitype=with_optitype_rna)
    assert rna_hla_typing("hg38", with_seq2hla, with_optitype_rna) == expected


def test_rna_hla_typing_mouse():
    """Tests no RNA HLA typing on mouse references"""
    assert rna_hla_typing("mm10", True, True) == NO_RNA_HLA_TYPING


def test_plan_branches_minimal(minimal_parameters):
    plan = plan_branches(minimal_parameters)
    assert not plan.mouse_run
    assert plan.optional_callers == ()
    assert not plan.region_filter
    assert not plan.rna
    assert plan.rna_hla_typing == NO_RNA_HLA_TYPING
    assert plan.dna_optitype == ()
    assert plan.allele_source is None
    assert not plan.vaxrank
    assert plan.annotate_vcfs
    assert not plan.notify


def test_plan_branches_rna_flags_without_rna():
    """Tests RNA typing flags have no effect without RNA inputs"""
    plan = plan_branches(make_parameters(with_seq2hla=True, with_optitype_rna=True))
    assert plan.rna_hla_typing == NO_RNA_HLA_TYPING
    assert plan.allele_source is None


def test_plan_branches_full():
    params = make_parameters(
        reference_build="hg38",
        rna_inputs=[pe_sample("rna")],
        bedfile="/targets.bed",
        with_mutect2=True,
        with_somaticsniper=True,
        with_seq2hla=True,
        with_optitype_tumor=True,
    )
    plan = plan_branches(params)
    assert plan.optional_callers == ("mutect2", "somatic-sniper")
    assert plan.region_filter
    assert plan.rna
    assert plan.rna_hla_typing == RnaHlaTyping(seq2hla=True, optitype=False)
    assert plan.dna_optitype == ("Tumor",)
    assert plan.allele_source == AlleleSourceKind.SEQ2HLA
    assert plan.vaxrank
    assert not plan.annotate_vcfs


def test_plan_branches_mouse_optitype_fallback():
    """Tests the mouse reference falls back to the DNA OptiType result"""
    params = make_parameters(
        reference_build="mm10",
        mouse_run=True,
        rna_inputs=[pe_sample("rna")],
        with_seq2hla=True,
        with_optitype_rna=True,
        with_optitype_normal=True,
    )
    plan = plan_branches(params)
    assert plan.rna_hla_typing == NO_RNA_HLA_TYPING
    assert plan.allele_source == AlleleSourceKind.OPTITYPE
    assert plan.vaxrank


def test_plan_branches_override():
    params = make_parameters(mhc_alleles=["A*01:01"], with_optitype_normal=True)
    plan = plan_branches(params)
    assert plan.allele_source == AlleleSourceKind.MHC_ALLELES
    assert not plan.vaxrank  # no RNA


def test_iter_branch_plans():
    """Tests the enumeration of branch plans"""
    plans = list(iter_branch_plans(["b37", "mm10"]))
    assert len(plans) == len(set(plans))
    assert not any(plan.rna_hla_typing.seq2hla for plan in plans if not plan.rna)
    assert not any(
        plan.rna_hla_typing != NO_RNA_HLA_TYPING for plan in plans if not plan.annotate_vcfs
    )
    assert all(plan.vaxrank == (plan.rna and plan.allele_source is not None) for plan in plans)
    assert {plan.allele_source for plan in plans} == {None, *AlleleSourceKind}
