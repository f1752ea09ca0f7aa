"""Shared fixtures for genomic-validator tests."""

import pytest

from genomicvalidator.config import ENV_PREFIX

VALID_VCF = """##fileformat=VCFv4.2
##contig=<ID=1,length=249250621>
##INFO=<ID=DP,Number=1,Type=Integer,Description="Total Depth">
##FILTER=<ID=q10,Description="Quality below 10">
##FORMAT=<ID=GT,Number=1,Type=String,Description="Genotype">
##FORMAT=<ID=DP,Number=1,Type=Integer,Description="Read Depth">
#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\tFORMAT\tNA00001\tNA00002
1\t14370\trs6054257\tG\tA\t29\tPASS\tDP=14\tGT:DP\t0|0:1\t0/1:8
chrX\t17330\t.\tT\tA,<DEL>\t3\tq10\tDP=11\tGT:DP\t1/1:3\t./.:0
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep GENOMICVALIDATOR_* flags set by the CLI from leaking between tests."""
    for name in ("VERBOSE", "QUIET", "JSON"):
        monkeypatch.setenv(f"{ENV_PREFIX}{name}", "0")
    monkeypatch.setenv("DEBUG", "0")


@pytest.fixture
def vcf_text():
    return VALID_VCF


@pytest.fixture
def valid_vcf(tmp_path, vcf_text):
    path = tmp_path / "valid.vcf"
    path.write_text(vcf_text)
    return path
