import pytest

from madnes.cartridge import (
    CHR_ROM_UNIT,
    MAGIC,
    PRG_ROM_UNIT,
    TRAINER_SIZE,
    Cartridge,
    CartridgeError,
    format_cart_metadata,
    load_rom,
    parse_rom,
    print_cart_metadata,
)


def make_rom(prg_units=1, chr_units=1, flags6=0, flags7=0, flags8=0, trainer=None):
    header = MAGIC + bytes([prg_units, chr_units, flags6, flags7, flags8, 0, 0]) + bytes(5)
    prg = bytes((i * 7) & 0xFF for i in range(prg_units * PRG_ROM_UNIT))
    chr_data = bytes((i * 3) & 0xFF for i in range(chr_units * CHR_ROM_UNIT))
    return header + (trainer or b"") + prg + chr_data, prg, chr_data


def test_parse_round_trip_sections():
    data, prg, chr_data = make_rom()
    cart = parse_rom(data)
    assert cart.prg_rom == prg
    assert cart.chr_rom == chr_data
    assert cart.trainer is None
    assert cart.magic_num == MAGIC
    assert cart.prg_rom_size == 1 and cart.chr_rom_size == 1


def test_bad_magic_number():
    data, _, _ = make_rom()
    with pytest.raises(CartridgeError) as info:
        parse_rom(b"XES\x1a" + data[4:])
    assert info.value.code == -2


@pytest.mark.parametrize(
    "length, code",
    [(4, -3), (5, -4), (6, -5), (7, -6), (8, -7), (9, -8), (10, -8)],
)
def test_truncated_header(length, code):
    data, _, _ = make_rom()
    with pytest.raises(CartridgeError) as info:
        parse_rom(data[:length])
    assert info.value.code == code


def test_nonzero_reserved_bits():
    data, _, _ = make_rom()
    broken = data[:11] + b"\x01" + data[12:]
    with pytest.raises(CartridgeError) as info:
        parse_rom(broken)
    assert info.value.code == -9


def test_trainer_is_read_when_flagged():
    trainer = bytes(range(256)) * 2
    data, prg, _ = make_rom(flags6=0x04, trainer=trainer)
    cart = parse_rom(data)
    assert cart.trainer == trainer
    assert cart.prg_rom == prg


def test_short_trainer():
    data, _, _ = make_rom(prg_units=0, chr_units=0, flags6=0x04)
    with pytest.raises(CartridgeError) as info:
        parse_rom(data + bytes(TRAINER_SIZE - 1))
    assert info.value.code == -10


def test_short_prg_rom():
    data, _, _ = make_rom(chr_units=0)
    with pytest.raises(CartridgeError) as info:
        parse_rom(data[:-1])
    assert info.value.code == -11


def test_short_chr_rom():
    data, _, _ = make_rom()
    with pytest.raises(CartridgeError) as info:
        parse_rom(data[:-1])
    assert info.value.code == -12


def test_load_rom_from_file(tmp_path):
    data, prg, chr_data = make_rom(flags6=0x01)
    path = tmp_path / "game.nes"
    path.write_bytes(data)
    cart = load_rom(path)
    assert cart.prg_rom == prg
    assert cart.chr_rom == chr_data
    assert cart.mirroring() == "Vertical"


def test_load_rom_missing_file(tmp_path):
    with pytest.raises(CartridgeError) as info:
        load_rom(tmp_path / "absent.nes")
    assert info.value.code == -1


@pytest.mark.parametrize(
    "flags7, name",
    [
        (0, "NES/Famicom"),
        (1, "Nintendo Vs. System"),
        (2, "Nintendo Playchoice 10"),
        (3, "Extended"),
    ],
)
def test_console_type(flags7, name):
    assert Cartridge(flags7=flags7).console_type() == name


def test_mapper_and_submapper_from_flags():
    assert Cartridge().mapper() == 0
    assert Cartridge(flags6=0x40).mapper() == 0x40
    assert Cartridge(flags8=0x20).submapper() == 0x20
    assert Cartridge(flags6=0x0F).mapper() == 0


def test_mirroring_horizontal():
    assert Cartridge(flags6=0x00).mirroring() == "Horizontal"


def test_format_metadata():
    data, _, _ = make_rom(flags6=0x04 | 0x02, trainer=bytes(TRAINER_SIZE))
    text = format_cart_metadata(parse_rom(data))
    lines = text.splitlines()
    assert lines[0] == "--------------- ROM Data ---------------"
    assert "            Trainer: Present" in lines
    assert "            Battery: Present" in lines
    assert "       Console Type: NES/Famicom" in lines
    assert "     Alt Nametables: No" in lines
    assert len(lines) == 11


def test_print_metadata(capsys):
    cart = Cartridge(prg_rom_size=2)
    print_cart_metadata(cart)
    assert capsys.readouterr().out == format_cart_metadata(cart) + "\n"