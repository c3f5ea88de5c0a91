"""
Vendor and product family normalization tables.

Firmware reports the same manufacturer under several spellings, and some
product families under names that are awkward to key on. These tables map
what DMI reports to the short lowercase identifiers the rest of hwprobe
uses.
"""
from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Tuple

# (raw vendor as reported by firmware, canonical name)
HARDWARE_VENDOR_REPLACEMENTS: Tuple[Tuple[str, str], ...] = (
    ("Hewlett-Packard", "hp"),
    ("Hewlett Packard", "hp"),
)

# canonical vendor -> {lowercase raw family: corrected family}
FAMILY_EXCEPTION_RULES: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "framework": MappingProxyType({
        "13in laptop": "13inch",
        "16in laptop": "16inch",
    }),
})


def normalize_vendor(raw: str) -> str:
    """Map a raw ``sys_vendor`` value to its canonical name.

    An alias applies when the trimmed raw value contains it, so
    "Hewlett-Packard Development Company" resolves to "hp" as well.
    Unknown vendors are lowercased.
    """
    vendor = raw.strip()
    for alias, canonical in HARDWARE_VENDOR_REPLACEMENTS:
        if alias in vendor:
            return canonical
    return vendor.lower()


def normalize_family(vendor: str, raw: str) -> str:
    """Lowercase a raw ``product_family``, applying the vendor's exceptions."""
    family = raw.strip().lower()
    rules = FAMILY_EXCEPTION_RULES.get(vendor)
    if rules is not None:
        return rules.get(family, family)
    return family


def normalize_product(raw: str) -> str:
    return raw.strip().lower()
