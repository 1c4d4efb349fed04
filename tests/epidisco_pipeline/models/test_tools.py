# -*- coding: utf-8 -*-
"""Tests for the tool configuration registry"""

from epidisco_pipeline.models.tools import (
    INDEL_REALIGNER_CONFIG,
    MUTECT_CONFIG,
    MUTECT_CONFIG_MOUSE,
    STAR_CONFIG,
    VAXRANK_CONFIG,
    mark_dups_config,
    mutect_config,
)


def test_indel_realigner_config_ignores_malformed_reads():
    for cfg in (INDEL_REALIGNER_CONFIG.indel_realigner, INDEL_REALIGNER_CONFIG.target_creator):
        assert cfg.name == "ignore-mismatch"
        assert cfg.filter_reads_with_n_cigar
        assert cfg.filter_mismatching_base_and_quals
        assert cfg.filter_bases_not_stored
        assert cfg.parameters == ()


def test_star_config_sets_mapq():
    assert STAR_CONFIG.name == "mapq_default_60"
    assert STAR_CONFIG.sam_mapq_unique == 60
    assert STAR_CONFIG.overhang_length is None


def test_vaxrank_config():
    assert VAXRANK_CONFIG.name == "PGV-configuration"
    assert VAXRANK_CONFIG.padding_around_mutation == 5
    assert VAXRANK_CONFIG.max_vaccine_peptides_per_mutation == 3
    assert VAXRANK_CONFIG.max_mutations_in_report == 20


def test_mutect_config():
    assert mutect_config(False) == MUTECT_CONFIG
    assert mutect_config(True) == MUTECT_CONFIG_MOUSE
    assert not MUTECT_CONFIG_MOUSE.with_cosmic


def test_mark_dups_config():
    assert mark_dups_config().mem_param is None
    cfg = mark_dups_config("16g")
    assert cfg.name == "picard-with-heap"
    assert cfg.mem_param == "16g"
