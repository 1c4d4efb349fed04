# -*- coding: utf-8 -*-
"""Tests for the parameter model"""

import pytest
from pydantic import ValidationError

from epidisco_pipeline.models.inputs import PairedEndFastq, SampleInput, SingleEndFastq
from epidisco_pipeline.models.parameters import (
    construct_run_directory,
    construct_run_name,
    metadata,
)

from ..conftest import make_parameters, pe_sample


def test_construct_run_name_without_rna():
    """Tests construct_run_name() without RNA inputs"""
    params = make_parameters(tumor_inputs=[pe_sample("t1"), pe_sample("t2")])
    assert construct_run_name(params) == "exp-1normals-2tumors--b37"


def test_construct_run_name_with_rna():
    """Tests construct_run_name() with RNA inputs"""
    params = make_parameters(rna_inputs=[pe_sample("rna")], reference_build="hg19")
    assert construct_run_name(params) == "exp-1normals-1tumors-1rnas-hg19"


def test_construct_run_name_ignores_sample_content():
    """Tests construct_run_name() only depends on the shape of the inputs"""
    first = make_parameters(normal_inputs=[pe_sample("a", lanes=1)])
    second = make_parameters(normal_inputs=[pe_sample("b", lanes=3)])
    assert first != second
    assert construct_run_name(first) == construct_run_name(second)


def test_construct_run_directory():
    """Tests construct_run_directory() excludes the samples"""
    params = make_parameters(rna_inputs=[pe_sample("rna")], reference_build="mm10")
    assert construct_run_directory(params) == "exp-mm10"


def test_metadata_minimal(minimal_parameters):
    """Tests metadata() without alleles and RNA"""
    expected = [
        ("MHC Alleles", "None provided"),
        ("Reference-build", "b37"),
        ("Normal-inputs", "normal, 1 fragment: Paired-end FASTQ"),
        ("Tumor-inputs", "tumor, 1 fragment: Paired-end FASTQ"),
        ("RNA-inputs", "none"),
    ]
    assert metadata(minimal_parameters) == expected


def test_metadata_with_alleles_and_fragments(mixed_sample):
    """Tests metadata() describes alleles and homogeneous/heterogeneous fragments"""
    params = make_parameters(
        mhc_alleles=["HLA-A*02:01", "HLA-B*07:02"],
        tumor_inputs=[pe_sample("tumor", lanes=3)],
        rna_inputs=[mixed_sample],
    )
    actual = dict(metadata(params))
    assert actual["MHC Alleles"] == "Alleles: [HLA-A*02:01; HLA-B*07:02]"
    assert actual["Tumor-inputs"] == "tumor, 3 fragments: all Paired-end FASTQ"
    assert actual["RNA-inputs"] == "mixed, 4 fragments: heterogeneous"


def test_sample_describe_single_end():
    """Tests SampleInput.describe() for single-end FASTQ"""
    sample = SampleInput(sample_name="s", fragments=[SingleEndFastq(r="/r.fq")])
    assert sample.describe() == "s, 1 fragment: Single-end FASTQ"


def test_fragment_kind_from_dict():
    """Tests the fragment variant is selected by its ``kind``"""
    sample = SampleInput(
        sample_name="s",
        fragments=[
            {"kind": "PE", "r1": "/r1.fq", "r2": "/r2.fq"},
            {"kind": "bam_SE", "path": "/x.bam", "reference_build": "b37"},
        ],
    )
    assert isinstance(sample.fragments[0], PairedEndFastq)
    assert sample.fragments[1].description == "Single-end-from-bam"


@pytest.mark.parametrize("field", ["normal_inputs", "tumor_inputs", "rna_inputs"])
def test_empty_inputs_rejected(field):
    """Tests empty sample lists are rejected"""
    with pytest.raises(ValidationError):
        make_parameters(**{field: []})


def test_empty_fragments_rejected():
    """Tests samples without fragments are rejected"""
    with pytest.raises(ValidationError):
        SampleInput(sample_name="s", fragments=[])


def test_unknown_key_rejected():
    """Tests unknown parameters are rejected"""
    with pytest.raises(ValidationError):
        make_parameters(with_unicorns=True)


def test_java_heap_validated():
    """Tests picard_java_max_heap must look like a Java heap size"""
    assert make_parameters(picard_java_max_heap="8g").picard_java_max_heap == "8g"
    with pytest.raises(ValidationError):
        make_parameters(picard_java_max_heap="lots")


def test_parameters_immutable(minimal_parameters):
    """Tests parameters cannot be changed after construction"""
    with pytest.raises(ValidationError):
        minimal_parameters.mouse_run = True


def test_model_dump_yaml(minimal_parameters):
    """Tests Parameters.model_dump_yaml()"""
    dumped = minimal_parameters.model_dump_yaml(exclude_none=True)
    assert "experiment_name: exp" in dumped
    assert "mhc_alleles" not in dumped
