from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple, Union

from rfc5424 import (
    StructuredDataName,
    StructuredDataParam,
    invalid_value,
    missing_field,
    too_large,
    utf8_len,
)

from .version import SoftwareVersion

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

ORIGIN_ID = StructuredDataName("origin")

# Byte limits from RFC 5424 section 7.2.
MAX_SOFTWARE_NAME_BYTES = 48
MAX_SOFTWARE_VERSION_BYTES = 32


def _encoded_len(field: str, text: str) -> int:
    try:
        return utf8_len(text)
    except UnicodeEncodeError:
        raise invalid_value(f"{field} is not valid UTF-8") from None


def _format_ip(ip: IPAddress) -> str:
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        return str(ip.ipv4_mapped)
    return str(ip)


def _norm_ips(values: Iterable[Union[str, IPAddress]]) -> Tuple[IPAddress, ...]:
    out: list[IPAddress] = []
    for v in values:
        if isinstance(v, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            out.append(v)
        else:
            out.append(ipaddress.ip_address(str(v).strip()))
    return tuple(out)


@dataclass(frozen=True)
class OriginEnterpriseID:
    """
    IANA private enterprise number plus its sub-identifier arc.

    sub_tree is kept in storage order; str() emits it reversed after the
    number, e.g. number=32473, sub_tree=(1, 2, 3, 4) -> "32473.4.3.2.1".
    """

    number: int = 0
    sub_tree: Tuple[int, ...] = ()

    def is_zero(self) -> bool:
        return self.number == 0 and not self.sub_tree

    def __str__(self) -> str:
        parts = [str(self.number)]
        parts.extend(str(n) for n in reversed(self.sub_tree))
        return ".".join(parts)

    @classmethod
    def from_string(cls, text: str) -> "OriginEnterpriseID":
        raw = str(text).strip()
        segments = raw.split(".")
        if not raw or not all(s.isascii() and s.isdigit() for s in segments):
            raise ValueError(f"invalid enterprise ID {text!r}")
        numbers = [int(s) for s in segments]
        return cls(number=numbers[0], sub_tree=tuple(reversed(numbers[1:])))


@dataclass(frozen=True)
class Origin:
    """
    The "origin" SD element (RFC 5424 section 7.2).

    Params are emitted in field order (ip..., enterpriseID, software,
    swVersion) and only for non-empty fields. swVersion is only emitted
    alongside software.
    """

    ips: Tuple[IPAddress, ...] = ()
    enterprise_id: OriginEnterpriseID = field(default_factory=OriginEnterpriseID)
    software_name: str = ""
    software_version: SoftwareVersion = field(default_factory=SoftwareVersion)

    @classmethod
    def from_iterables(
        cls,
        *,
        ips: Iterable[Union[str, IPAddress]] = (),
        enterprise_number: int = 0,
        sub_tree: Iterable[int] = (),
        software_name: str = "",
        software_version: Union[SoftwareVersion, str, None] = None,
    ) -> "Origin":
        if software_version is None:
            version = SoftwareVersion()
        elif isinstance(software_version, SoftwareVersion):
            version = software_version
        else:
            version = SoftwareVersion.parse(software_version)
        return cls(
            ips=_norm_ips(ips),
            enterprise_id=OriginEnterpriseID(number=int(enterprise_number), sub_tree=tuple(int(n) for n in sub_tree)),
            software_name=str(software_name),
            software_version=version,
        )

    def id(self) -> StructuredDataName:
        return ORIGIN_ID

    def params(self) -> List[StructuredDataParam]:
        params = [StructuredDataParam.of("ip", _format_ip(ip)) for ip in self.ips]

        if not self.enterprise_id.is_zero():
            params.append(StructuredDataParam.of("enterpriseID", str(self.enterprise_id)))

        if self.software_name:
            params.append(StructuredDataParam.of("software", self.software_name))
            params.append(StructuredDataParam.of("swVersion", str(self.software_version)))

        return params

    def validate(self) -> None:
        """Checks, first failure wins: EnterpriseID, SoftwareName, SoftwareName size, SoftwareVersion size."""
        if self.enterprise_id.is_zero():
            raise missing_field("EnterpriseID")

        if not self.software_name:
            raise missing_field("SoftwareName")
        if _encoded_len("SoftwareName", self.software_name) > MAX_SOFTWARE_NAME_BYTES:
            raise too_large("SoftwareName", self.software_name, MAX_SOFTWARE_NAME_BYTES)

        version = str(self.software_version)
        if _encoded_len("SoftwareVersion", version) > MAX_SOFTWARE_VERSION_BYTES:
            raise too_large("SoftwareVersion", version, MAX_SOFTWARE_VERSION_BYTES)
