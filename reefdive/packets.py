"""Buoyancy Interchange Transmission System packet decoder."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from enum import IntEnum

_LITERAL_TYPE = 4


class Opcode(IntEnum):
    SUM = 0
    PRODUCT = 1
    MINIMUM = 2
    MAXIMUM = 3
    GREATER_THAN = 5
    LESS_THAN = 6
    EQUAL_TO = 7


_FORMAT = {
    Opcode.SUM: ("(", "+"),
    Opcode.PRODUCT: ("(", "*"),
    Opcode.MINIMUM: ("min(", ","),
    Opcode.MAXIMUM: ("max(", ","),
    Opcode.GREATER_THAN: ("(", ">"),
    Opcode.LESS_THAN: ("(", "<"),
    Opcode.EQUAL_TO: ("(", "=="),
}


class BitReader:
    """Read big-endian bit fields from a byte string."""

    def __init__(self, data: bytes) -> None:
        data = bytes(data)
        self._bits = int.from_bytes(data, "big")
        self._length = len(data) * 8
        self.position = 0

    def read(self, count: int) -> int:
        """Read the next ``count`` bits as an unsigned integer."""
        if count < 0:
            raise ValueError("bit count must not be negative")
        end = self.position + count
        if end > self._length:
            raise EOFError("unexpected end of packet data")
        value = (self._bits >> (self._length - end)) & ((1 << count) - 1)
        self.position = end
        return value


@dataclass(frozen=True)
class Packet:
    """A literal packet (``opcode`` is None) or an operator over sub-packets."""

    version: int
    opcode: Opcode | None = None
    literal: int = 0
    subpackets: tuple[Packet, ...] = ()

    def version_sum(self) -> int:
        """Sum of the versions of this packet and every packet inside it."""
        return self.version + sum(packet.version_sum() for packet in self.subpackets)

    def value(self) -> int:
        """Evaluate the expression the packet encodes."""
        if self.opcode is None:
            return self.literal
        values = [packet.value() for packet in self.subpackets]
        if self.opcode is Opcode.SUM:
            return sum(values)
        if self.opcode is Opcode.PRODUCT:
            return math.prod(values)
        if self.opcode in (Opcode.MINIMUM, Opcode.MAXIMUM):
            if not values:
                raise ValueError(f"{self.opcode.name.lower()} of no sub-packets")
            return min(values) if self.opcode is Opcode.MINIMUM else max(values)
        if len(values) < 2:
            raise ValueError("comparison needs two sub-packets")
        first, second = values[0], values[1]
        if self.opcode is Opcode.GREATER_THAN:
            return int(first > second)
        if self.opcode is Opcode.LESS_THAN:
            return int(first < second)
        return int(first == second)

    def __str__(self) -> str:
        if self.opcode is None:
            return str(self.literal)
        head, separator = _FORMAT[self.opcode]
        body = separator.join(str(packet) for packet in self.subpackets)
        return head + body + (")" if self.subpackets else "")


def _read_literal(reader: BitReader) -> int:
    value = 0
    more = True
    while more:
        more = bool(reader.read(1))
        value = (value << 4) | reader.read(4)
    return value


def _read_packet(reader: BitReader) -> Packet:
    version = reader.read(3)
    type_id = reader.read(3)
    if type_id == _LITERAL_TYPE:
        return Packet(version, literal=_read_literal(reader))
    opcode = Opcode(type_id)
    if reader.read(1):
        count = reader.read(11)
        subpackets = tuple(_read_packet(reader) for _ in range(count))
    else:
        length = reader.read(15)
        end = reader.position + length
        collected = []
        while reader.position < end:
            collected.append(_read_packet(reader))
        if reader.position != end:
            raise ValueError("sub-packets overrun their declared length")
        subpackets = tuple(collected)
    return Packet(version, opcode, subpackets=subpackets)


def decode_packet(data: bytes) -> Packet:
    """Decode the outermost packet from raw bytes; trailing padding is ignored."""
    return _read_packet(BitReader(data))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Decode a binary transmission.")
    parser.add_argument("input", nargs="?", help="binary input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        data = sys.stdin.buffer.read()
    else:
        with open(args.input, "rb") as handle:
            data = handle.read()
    try:
        packet = decode_packet(data)
    except (EOFError, ValueError) as exc:
        print(f"Error: {exc}")
        return 1
    print(f"Expr: {packet}")
    print(f"Version sum: {packet.version_sum()}")
    print(f"Value: {packet.value()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())