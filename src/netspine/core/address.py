"""
Fixed-width address arithmetic.

An address is an unsigned integer of a fixed bit width (32 for IPv4, 128 for
IPv6). Parsing and rendering go through the stdlib ``ipaddress`` module;
arithmetic happens on the integer value so carries propagate across the whole
address instead of octet by octet.

Manifesto:
    Address math should be boring. Treat the address as one big unsigned
    integer, mask it, add to it, render it. Nothing else.

    - **Whole-width carry:** ``10.0.0.255 + 1 == 10.0.1.0``
    - **Silent wrap:** arithmetic is modulo ``2**width`` unless the caller
      asks for a checked offset
    - **Immutable:** Address and Block are frozen dataclasses

Examples:
    >>> from netspine.core.address import Address, Block
    >>> str(Address.parse("10.0.0.255") + 1)
    '10.0.1.0'
    >>> block = Block.parse("10.0.0.77/24")
    >>> str(block.network), block.capacity
    ('10.0.0.0', 256)

Tags:
    netspine, core, address, ipv4, ipv6, cidr, arithmetic

Doc-Types:
    api-reference
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass

from netspine.core.errors import BoundsError, ParseError

IPV4_WIDTH = 32
IPV6_WIDTH = 128


@dataclass(frozen=True, slots=True)
class Address:
    """An unsigned integer of ``width`` bits rendered as an IP address."""

    value: int
    width: int = IPV4_WIDTH

    def __post_init__(self) -> None:
        if self.width not in (IPV4_WIDTH, IPV6_WIDTH):
            raise ValueError(f"Unsupported address width {self.width}")
        if not 0 <= self.value < self.space:
            raise ValueError(f"Address value {self.value} does not fit in {self.width} bits")

    @classmethod
    def parse(cls, text: str) -> Address:
        """Parse a bare IPv4 or IPv6 address. Raises ValueError on bad input.

        Zone-scoped IPv6 text (``fe80::1%eth0``) is rejected; the zone
        cannot survive integer arithmetic.
        """
        ip = ipaddress.ip_address(text)
        if getattr(ip, "scope_id", None):
            raise ValueError(f"{text!r} carries a zone, which is not supported")
        return cls(int(ip), ip.max_prefixlen)

    @property
    def space(self) -> int:
        """Number of distinct values an address of this width can hold."""
        return 1 << self.width

    def offset(self, delta: int, *, checked: bool = False) -> Address:
        """Return ``self + delta``.

        Wraps modulo ``2**width`` unless ``checked`` is set, in which case a
        result outside the address space raises BoundsError.
        """
        raw = self.value + delta
        if checked and not 0 <= raw < self.space:
            raise BoundsError(
                f"Offset {delta} from {self} falls outside the {self.width}-bit address space"
            ).with_context(argument_value=delta)
        return Address(raw % self.space, self.width)

    def mask(self, prefixlen: int) -> Address:
        """Clear every bit past ``prefixlen``."""
        host_bits = self.width - prefixlen
        return Address((self.value >> host_bits) << host_bits, self.width)

    def __add__(self, delta: int) -> Address:
        if not isinstance(delta, int):
            return NotImplemented
        return self.offset(delta)

    def __str__(self) -> str:
        if self.width == IPV4_WIDTH:
            return str(ipaddress.IPv4Address(self.value))
        return str(ipaddress.IPv6Address(self.value))


@dataclass(frozen=True, slots=True)
class Block:
    """A network address plus prefix length."""

    network: Address
    prefixlen: int

    @classmethod
    def parse(cls, text: str) -> Block:
        """Parse ``address/prefix`` notation.

        Host bits are masked off, so ``10.0.0.77/24`` yields the block based at
        ``10.0.0.0``. Text without a ``/`` is not a block and raises ValueError, as
        does a netmask or hostmask in place of a decimal prefix length.
        """
        address, slash, prefix = text.rpartition("/")
        if not slash:
            raise ValueError(f"{text!r} has no prefix length")
        if not (prefix.isascii() and prefix.isdigit()):
            raise ValueError(f"{text!r} prefix length must be a decimal number, not {prefix!r}")
        if "%" in address:
            raise ValueError(f"{text!r} carries a zone, which is not supported")
        net = ipaddress.ip_network(text, strict=False)
        network = Address(int(net.network_address), net.max_prefixlen)
        return cls(network.mask(net.prefixlen), net.prefixlen)

    @property
    def width(self) -> int:
        return self.network.width

    @property
    def capacity(self) -> int:
        """Addresses in the block, network and broadcast included."""
        return 1 << (self.width - self.prefixlen)

    def __str__(self) -> str:
        return f"{self.network}/{self.prefixlen}"


def parse_block_or_address(text: str) -> tuple[Address, Block | None]:
    """Parse ``text`` as a Block, falling back to a bare Address.

    Returns the base address (masked when a Block was parsed) and the Block,
    or ``None`` in its place for a bare address.

    Raises:
        ParseError: if ``text`` is neither a block nor an address.
    """
    try:
        block = Block.parse(text)
    except ValueError as block_exc:
        try:
            return Address.parse(text), None
        except ValueError:
            raise ParseError(
                f"Unable to parse {text!r} as an IP address or CIDR block",
                cause=block_exc,
            ).with_context(argument_index=0, argument_value=text)
    return block.network, block
