"""
Schema registry and meta-information line validation.

Each recognized ``##key=`` line is checked against a MetaSchema built from a
few small structural checks: the ``<...>`` wrapper, a quote-aware comma split
and a key=value pair check per attribute. Keys missing from the registry fall
through to the PERMISSIVE schema and are accepted.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Tuple

from genomicvalidator.errors import SchemaError

ValueCheck = Callable[[str], bool]

_FILEFORMAT_RE = re.compile(r"VCFv\d+\.\d+")
_NUMBER_RE = re.compile(r"[.AGRU]|-?\d+")
_QUOTED_RE = re.compile(r'"[^"]+"')
_DIGITS_RE = re.compile(r"\d+")

VALID_TYPES = frozenset({"Integer", "Float", "Flag", "Character", "String"})

# Structural kinds a schema can have
SIMPLE = "simple"
STRUCTURED = "structured"
PLACEHOLDER = "placeholder"
ANY = "any"

# What to do with attributes after the ordered rules are consumed
EXTRAS_NONE = "none"
EXTRAS_QUOTED = "quoted"
EXTRAS_ANY = "any"


@dataclass(frozen=True)
class MetaLine:
    """A ``##`` line split into its key and value or attribute list."""
    raw: str
    key: str
    value: Optional[str]
    attributes: Tuple[str, ...] = ()

    @property
    def is_structured(self) -> bool:
        return self.value is not None and len(self.value) >= 2 \
            and self.value.startswith("<") and self.value.endswith(">")


@dataclass(frozen=True)
class AttributeRule:
    """One ordered ``key=value`` attribute of a structured line."""
    key: str
    check: ValueCheck
    optional: bool = False
    description: str = ""


@dataclass(frozen=True)
class MetaSchema:
    key: str
    kind: str
    error: str = ""
    value_check: Optional[ValueCheck] = None
    rules: Tuple[AttributeRule, ...] = field(default_factory=tuple)
    extras: str = EXTRAS_NONE

    def validate(self, meta: MetaLine) -> None:
        """Raise SchemaError if the line does not fit this schema."""
        if self.kind in (ANY, PLACEHOLDER):
            return

        if self.kind == SIMPLE:
            if meta.value is None or not self.value_check(meta.value):
                self._fail(meta, None)
            return

        if not meta.is_structured:
            self._fail(meta, "attributes must be enclosed in <...>")

        position = 0
        for rule in self.rules:
            pair = split_pair(meta.attributes[position]) if position < len(meta.attributes) else None
            if pair is not None and pair[0] == rule.key:
                if not rule.check(pair[1]):
                    self._fail(meta, f"{rule.key} {rule.description}".strip())
                position += 1
            elif not rule.optional:
                self._fail(meta, f"missing {rule.key} attribute")

        remaining = meta.attributes[position:]
        if self.extras == EXTRAS_NONE and remaining:
            self._fail(meta, f"unexpected attribute {remaining[0]!r}")
        if self.extras == EXTRAS_QUOTED:
            for attribute in remaining:
                pair = split_pair(attribute)
                if pair is None or not is_quoted(pair[1]):
                    self._fail(meta, f"additional attribute {attribute!r} must be key=\"value\"")

    def _fail(self, meta: MetaLine, detail: Optional[str]) -> None:
        if detail:
            raise SchemaError(f"{self.error} ({detail}): {meta.raw}", line=meta.raw)
        raise SchemaError(f"{self.error}: {meta.raw}", line=meta.raw)


def split_delimited(text: str, delimiter: str = ",") -> List[str]:
    """Split on delimiter, ignoring delimiters inside double quotes."""
    tokens = []
    current = []
    in_quotes = False
    for char in text:
        if char == '"':
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            tokens.append("".join(current))
            current = []
            continue
        current.append(char)
    tokens.append("".join(current))
    return tokens


def split_pair(token: str) -> Optional[Tuple[str, str]]:
    """``key=value`` -> (key, value); None when there is no key or no '='."""
    key, sep, value = token.partition("=")
    if not sep or not key:
        return None
    return key, value


def is_quoted(value: str) -> bool:
    return _QUOTED_RE.fullmatch(value) is not None


def is_identifier(value: str) -> bool:
    return value != "" and "," not in value


def parse_meta_line(line: str) -> MetaLine:
    """Decompose a line known to start with ``##``."""
    body = line[2:]
    key, sep, value = body.partition("=")
    if not sep:
        return MetaLine(raw=line, key=body, value=None)

    meta = MetaLine(raw=line, key=key, value=value)
    if meta.is_structured:
        attributes = tuple(split_delimited(value[1:-1]))
        return MetaLine(raw=line, key=key, value=value, attributes=attributes)
    return meta


_ID = AttributeRule("ID", is_identifier, description="must be non-empty")
_DESCRIPTION = AttributeRule("Description", is_quoted,
                             description="must be a non-empty quoted string")

_INFO_FORMAT_RULES = (
    _ID,
    AttributeRule("Number", lambda v: _NUMBER_RE.fullmatch(v) is not None,
                  description="must be ., A, G, R, U or an integer"),
    AttributeRule("Type", lambda v: v in VALID_TYPES,
                  description="must be one of " + ", ".join(sorted(VALID_TYPES))),
    _DESCRIPTION,
)

PERMISSIVE = MetaSchema(key="*", kind=ANY)

REGISTRY: Mapping[str, MetaSchema] = MappingProxyType({
    "fileformat": MetaSchema(
        key="fileformat", kind=SIMPLE, error="Invalid file format version",
        value_check=lambda v: _FILEFORMAT_RE.fullmatch(v) is not None),
    "contig": MetaSchema(
        key="contig", kind=STRUCTURED, error="Invalid contig line",
        rules=(_ID, AttributeRule("length", lambda v: _DIGITS_RE.fullmatch(v) is not None,
                                  optional=True, description="must be digits")),
        extras=EXTRAS_ANY),
    "ALT": MetaSchema(
        key="ALT", kind=STRUCTURED, error="Invalid ALT line",
        rules=(_ID, _DESCRIPTION)),
    "INFO": MetaSchema(
        key="INFO", kind=STRUCTURED, error="Invalid INFO or FORMAT line",
        rules=_INFO_FORMAT_RULES, extras=EXTRAS_QUOTED),
    "FORMAT": MetaSchema(
        key="FORMAT", kind=STRUCTURED, error="Invalid INFO or FORMAT line",
        rules=_INFO_FORMAT_RULES, extras=EXTRAS_QUOTED),
    "FILTER": MetaSchema(
        key="FILTER", kind=STRUCTURED, error="Invalid FILTER line",
        rules=(_ID, _DESCRIPTION)),
    "SAMPLE": MetaSchema(key="SAMPLE", kind=PLACEHOLDER),
    "PEDIGREE": MetaSchema(key="PEDIGREE", kind=PLACEHOLDER),
})


def schema_for(key: str) -> MetaSchema:
    """Registered schema for key, or PERMISSIVE for anything unknown."""
    return REGISTRY.get(key, PERMISSIVE)


def validate_meta_line(line: str) -> MetaLine:
    """Validate one ``##`` line. Raises SchemaError on a violation."""
    meta = parse_meta_line(line)
    # "##INFO" without '=' never selects the INFO schema
    schema = schema_for(meta.key) if meta.value is not None else PERMISSIVE
    schema.validate(meta)
    return meta
