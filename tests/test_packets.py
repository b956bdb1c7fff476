import math

import pytest

from reefdive.packets import BitReader, Opcode, Packet, decode_packet, main


def literal_bits(version, value):
    digits = f"{value:b}"
    digits = "0" * (-len(digits) % 4) + digits
    groups = [digits[i : i + 4] for i in range(0, len(digits), 4)]
    body = "".join(
        ("1" if i < len(groups) - 1 else "0") + group for i, group in enumerate(groups)
    )
    return f"{version:03b}100" + body


def operator_bits(version, type_id, children, by_count=True):
    body = "".join(children)
    if by_count:
        header = "1" + f"{len(children):011b}"
    else:
        header = "0" + f"{len(body):015b}"
    return f"{version:03b}{type_id:03b}" + header + body


def to_bytes(bits):
    bits += "0" * (-len(bits) % 8)
    return int(bits, 2).to_bytes(len(bits) // 8, "big")


@pytest.mark.parametrize("value", [0, 5, 15, 16, 2021, 2**40 + 3])
def test_literal_round_trip(value):
    packet = decode_packet(to_bytes(literal_bits(6, value)))
    assert packet.value() == value
    assert packet.opcode is None
    assert packet.version_sum() == 6
    assert str(packet) == str(value)


@pytest.mark.parametrize("by_count", [True, False])
@pytest.mark.parametrize(
    "opcode,combine",
    [
        (Opcode.SUM, sum),
        (Opcode.PRODUCT, math.prod),
        (Opcode.MINIMUM, min),
        (Opcode.MAXIMUM, max),
    ],
)
def test_reducing_operators(opcode, combine, by_count):
    values = [7, 3, 12]
    children = [literal_bits(1, v) for v in values]
    packet = decode_packet(to_bytes(operator_bits(2, opcode, children, by_count)))
    assert packet.opcode is opcode
    assert [child.value() for child in packet.subpackets] == values
    assert packet.value() == combine(values)


@pytest.mark.parametrize(
    "opcode,first,second,expected",
    [
        (Opcode.GREATER_THAN, 5, 3, 1),
        (Opcode.GREATER_THAN, 3, 5, 0),
        (Opcode.LESS_THAN, 3, 5, 1),
        (Opcode.LESS_THAN, 5, 3, 0),
        (Opcode.EQUAL_TO, 4, 4, 1),
        (Opcode.EQUAL_TO, 4, 9, 0),
    ],
)
def test_comparisons(opcode, first, second, expected):
    children = [literal_bits(0, first), literal_bits(0, second)]
    packet = decode_packet(to_bytes(operator_bits(0, opcode, children)))
    assert packet.value() == expected


def test_version_sum_of_nested_packets():
    inner = operator_bits(3, Opcode.SUM, [literal_bits(4, 1), literal_bits(5, 2)], False)
    outer = operator_bits(1, Opcode.PRODUCT, [inner, literal_bits(2, 9)])
    packet = decode_packet(to_bytes(outer))
    assert packet.version_sum() == 1 + 3 + 4 + 5 + 2


def test_known_transmissions():
    assert decode_packet(bytes.fromhex("8A004A801A8002F478")).version_sum() == 16
    assert decode_packet(bytes.fromhex("9C0141080250320F1802104A08")).value() == 1


def test_string_forms():
    children = [literal_bits(0, 1), literal_bits(0, 2)]
    summed = decode_packet(to_bytes(operator_bits(0, Opcode.SUM, children)))
    lowest = decode_packet(to_bytes(operator_bits(0, Opcode.MINIMUM, children)))
    assert str(summed) == "(1+2)"
    assert str(lowest) == "min(1,2)"


def test_literal_type_is_not_an_opcode():
    with pytest.raises(ValueError):
        Opcode(4)


def test_truncated_data_raises():
    bits = literal_bits(1, 2021)
    with pytest.raises(EOFError):
        decode_packet(to_bytes(bits)[:1])


def test_overrunning_length_raises():
    child = literal_bits(0, 9)
    bits = f"{0:03b}{0:03b}" + "0" + f"{len(child) - 1:015b}" + child
    with pytest.raises(ValueError):
        decode_packet(to_bytes(bits))


def test_comparison_needs_two_children():
    packet = Packet(0, Opcode.LESS_THAN, subpackets=(Packet(0, literal=1),))
    with pytest.raises(ValueError):
        packet.value()


def test_minimum_of_nothing_raises():
    with pytest.raises(ValueError):
        Packet(0, Opcode.MINIMUM).value()


def test_bit_reader():
    reader = BitReader(b"\xa0")
    assert reader.read(3) == 5
    assert reader.read(5) == 0
    assert reader.position == 8
    with pytest.raises(EOFError):
        reader.read(1)


def test_main_prints_value(tmp_path, capsys):
    path = tmp_path / "input.bin"
    path.write_bytes(to_bytes(literal_bits(3, 77)))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Expr: 77", "Version sum: 3", "Value: 77"]


def test_main_reports_error(tmp_path, capsys):
    path = tmp_path / "input.bin"
    path.write_bytes(b"")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out.startswith("Error:")