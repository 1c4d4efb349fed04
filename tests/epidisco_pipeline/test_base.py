# -*- coding: utf-8 -*-
"""Tests for base module code"""

import io
import textwrap

import pytest

from epidisco_pipeline.base import (
    InvalidConfiguration,
    MissingConfiguration,
    load_parameters,
    load_parameters_files,
    merge_dictlikes,
    print_config,
)


def test_merge_dictlikes():
    """Tests recursive merging of configuration dictionaries"""
    first = {"a": 1, "b": {"c": 2, "d": 3}, "e": [1]}
    second = {"b": {"d": 4, "f": 5}, "e": [2], "g": 6}
    expected = {"a": 1, "b": {"c": 2, "d": 4, "f": 5}, "e": [2], "g": 6}
    assert merge_dictlikes(first, second) == expected


def test_merge_dictlikes_non_dict_overrides():
    assert merge_dictlikes({"a": {"b": 1}}, {"a": None}) == {"a": None}


def test_invalid_configuration_exception():
    """Tests InvalidConfiguration raise."""
    error_msg = "Raised InvalidConfiguration"
    with pytest.raises(Exception) as exec_info:
        raise InvalidConfiguration(error_msg)
    assert exec_info.value.args[0] == error_msg


def test_missing_configuration_is_invalid():
    assert issubclass(MissingConfiguration, InvalidConfiguration)


@pytest.mark.parametrize("config", [None, {}])
def test_load_parameters_missing(config):
    with pytest.raises(MissingConfiguration):
        load_parameters(config)


def test_load_parameters(parameters_dict):
    params = load_parameters(parameters_dict)
    assert params.experiment_name == "patient-1"
    assert params.rna_inputs[0].fragments[0].kind == "bam_PE"
    assert params.email_options.to_email == "analyst@example.com"


def test_load_parameters_invalid(parameters_dict):
    """Tests validation errors are reported as InvalidConfiguration"""
    parameters_dict["tumor_inputs"] = []
    with pytest.raises(InvalidConfiguration) as exec_info:
        load_parameters(parameters_dict)
    assert "tumor_inputs" in str(exec_info.value)


def test_load_parameters_unknown_key(parameters_dict):
    parameters_dict["with_everything"] = True
    with pytest.raises(InvalidConfiguration):
        load_parameters(parameters_dict)


def test_load_parameters_files(fs, parameters_yaml):
    """Tests later parameter files are merged over earlier ones"""
    fs.create_file("/work/params.yaml", contents=parameters_yaml)
    fs.create_file(
        "/work/override.yaml",
        contents=textwrap.dedent(
            """
            reference_build: hg38
            with_mutect2: true
            email_options:
              to_email: other@example.com
            """
        ),
    )
    params = load_parameters_files(["/work/params.yaml", "/work/override.yaml"])
    assert params.reference_build == "hg38"
    assert params.with_mutect2
    assert params.with_seq2hla
    assert params.email_options.to_email == "other@example.com"
    assert params.email_options.from_email == "pipeline@example.com"


def test_load_parameters_files_not_mapping(fs):
    fs.create_file("/work/params.yaml", contents="- just\n- a list\n")
    with pytest.raises(InvalidConfiguration):
        load_parameters_files(["/work/params.yaml"])


def test_load_parameters_files_empty(fs):
    fs.create_file("/work/params.yaml", contents="")
    with pytest.raises(MissingConfiguration):
        load_parameters_files(["/work/params.yaml"])


def test_print_config(parameters_dict):
    out = io.StringIO()
    print_config(load_parameters(parameters_dict), file=out)
    text = out.getvalue()
    assert "experiment_name: patient-1" in text
    assert "mhc_alleles" not in text
