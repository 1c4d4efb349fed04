# -*- coding: utf-8 -*-
"""Shared fixtures for the epidisco_pipeline unit tests"""

import textwrap

import pytest
import ruamel.yaml as yaml

from epidisco_pipeline.models.inputs import (
    PairedEndBam,
    PairedEndFastq,
    SampleInput,
    SingleEndBam,
    SingleEndFastq,
)
from epidisco_pipeline.models.parameters import Parameters
from epidisco_pipeline.semantics.recorder import GraphRecorder


def pe_sample(name, lanes=1):
    """Return sample with ``lanes`` paired-end FASTQ fragments"""
    return SampleInput(
        sample_name=name,
        fragments=[
            PairedEndFastq(
                fragment_id="L%03d" % (i + 1),
                r1="/data/%s_L%03d_R1.fastq.gz" % (name, i + 1),
                r2="/data/%s_L%03d_R2.fastq.gz" % (name, i + 1),
            )
            for i in range(lanes)
        ],
    )


def make_parameters(**kwargs):
    """Return ``Parameters`` with one normal and one tumor sample, overridden by ``kwargs``"""
    values = {
        "experiment_name": "exp",
        "reference_build": "b37",
        "normal_inputs": [pe_sample("normal")],
        "tumor_inputs": [pe_sample("tumor")],
    }
    values.update(kwargs)
    return Parameters(**values)


@pytest.fixture
def recorder():
    """Return fresh recording semantics"""
    return GraphRecorder()


@pytest.fixture
def mixed_sample():
    """Return sample with one fragment of each kind"""
    return SampleInput(
        sample_name="mixed",
        fragments=[
            PairedEndFastq(r1="/data/m_R1.fastq.gz", r2="/data/m_R2.fastq.gz"),
            SingleEndFastq(fragment_id="se", r="/data/m.fastq.gz"),
            SingleEndBam(path="/data/m_se.bam", reference_build="b37"),
            PairedEndBam(path="/data/m_pe.bam", reference_build="b37", sorting="coordinate"),
        ],
    )


@pytest.fixture
def minimal_parameters():
    """Return parameters without RNA and with all flags off"""
    return make_parameters()


@pytest.fixture
def rna_parameters():
    """Return parameters with RNA sample and RNA HLA typing"""
    return make_parameters(
        rna_inputs=[pe_sample("rna", lanes=2)], with_seq2hla=True, with_optitype_rna=True
    )


@pytest.fixture(scope="module")  # otherwise: performance issues
def parameters_yaml():
    """Return YAML text of a complete parameters file"""
    return textwrap.dedent(
        r"""
        experiment_name: patient-1
        reference_build: b37
        normal_inputs:
          - sample_name: normal
            fragments:
              - {kind: PE, r1: /data/normal_R1.fastq.gz, r2: /data/normal_R2.fastq.gz}
        tumor_inputs:
          - sample_name: tumor
            fragments:
              - {kind: PE, r1: /data/tumor_R1.fastq.gz, r2: /data/tumor_R2.fastq.gz}
              - {kind: SE, r: /data/tumor_extra.fastq.gz}
        rna_inputs:
          - sample_name: rna
            fragments:
              - {kind: bam_PE, path: /data/rna.bam, reference_build: b37}
        with_seq2hla: true
        with_optitype_normal: true
        email_options:
          from_email: pipeline@example.com
          to_email: analyst@example.com
          mailgun_domain: example.com
          mailgun_api_key: key-123
        """
    ).lstrip()


@pytest.fixture
def parameters_dict(parameters_yaml):
    """Return parsed ``parameters_yaml``"""
    return yaml.YAML(typ="safe").load(parameters_yaml)
