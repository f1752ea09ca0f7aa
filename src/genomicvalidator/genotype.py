"""
Genotype block validation.

A record's FORMAT column lists colon-delimited descriptors; each sample
column must carry exactly one value per descriptor. Values of known
descriptors are checked against the table below, unknown descriptors pass
through unchecked.
"""

from types import MappingProxyType
from typing import Callable, Mapping, NamedTuple, Sequence

from genomicvalidator.errors import CardinalityError, FieldError
from genomicvalidator.primitives import (
    is_boolean,
    is_float,
    is_genotype,
    is_integer_list,
    is_non_empty,
    is_non_negative_integer,
)


class Descriptor(NamedTuple):
    check: Callable[[str], bool]
    label: str


DESCRIPTORS: Mapping[str, Descriptor] = MappingProxyType({
    "GT": Descriptor(is_genotype, "genotype"),
    "DP": Descriptor(is_non_negative_integer, "read depth"),
    "GQ": Descriptor(is_non_negative_integer, "genotype quality"),
    "AD": Descriptor(is_integer_list, "allele depth"),
    "PL": Descriptor(is_integer_list, "phred-scaled genotype likelihoods"),
    "MQ": Descriptor(is_non_negative_integer, "mapping quality"),
    "SB": Descriptor(is_integer_list, "strand bias"),
    "MQ0": Descriptor(is_non_negative_integer, "MQ0"),
    "HRun": Descriptor(is_non_negative_integer, "homopolymer run length"),
    "AF": Descriptor(is_float, "allele frequency"),
    "AC": Descriptor(is_non_negative_integer, "allele count"),
    "AN": Descriptor(is_non_negative_integer, "total number of alleles"),
    "BaseQRankSum": Descriptor(is_float, "base quality rank sum test"),
    "ReadPosRankSum": Descriptor(is_float, "read position rank sum test"),
    "FS": Descriptor(is_float, "Fisher strand bias"),
    "SOR": Descriptor(is_float, "strand odds ratio"),
    "MQRankSum": Descriptor(is_float, "mapping quality rank sum test"),
    "QD": Descriptor(is_float, "quality by depth"),
    "RPA": Descriptor(is_integer_list, "repeat unit number"),
    "RU": Descriptor(is_non_empty, "repeat unit"),
    "STR": Descriptor(is_boolean, "short tandem repeat"),
})


def validate_sample(descriptors: Sequence[str], sample: str, index: int = 1) -> None:
    """Validate one sample column against the FORMAT descriptor list."""
    values = sample.split(":")
    if len(values) != len(descriptors):
        raise CardinalityError(
            f"Sample {index} has {len(values)} values but FORMAT has "
            f"{len(descriptors)} descriptors: {sample}")

    for code, value in zip(descriptors, values):
        descriptor = DESCRIPTORS.get(code)
        if descriptor is None:
            continue
        if not descriptor.check(value):
            raise FieldError(
                f"Invalid {descriptor.label} data for {code} in sample {index}: {value}",
                field=code)


def validate_genotype_block(format_field: str, samples: Sequence[str]) -> None:
    """Validate every sample column of a record. Raises on the first problem."""
    descriptors = format_field.split(":")
    for index, sample in enumerate(samples, start=1):
        validate_sample(descriptors, sample, index)
