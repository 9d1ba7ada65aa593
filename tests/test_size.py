from longlist.cell import BLACK, BLUE, CYAN, GREEN, RED, YELLOW, TextCell, TextCellContents, fixed
from longlist.links import NumericLocale
from longlist.size import DeviceIDs, Prefix, SizeFormat, render_size


class TestColours:
    def size(self, prefix):
        return fixed(66).normal()

    def unit(self, prefix):
        return fixed(77).bold()

    def no_size(self):
        return BLACK.italic()

    def major(self):
        return BLUE.on(RED)

    def comma(self):
        return GREEN.italic()

    def minor(self):
        return CYAN.on(YELLOW)


class PrefixColours(TestColours):
    def size(self, prefix):
        return fixed(1).normal() if prefix is None else fixed(2).normal()


ENGLISH = NumericLocale.english()


def test_directory():
    expected = TextCell.blank(BLACK.italic())
    assert render_size(None, TestColours(), SizeFormat.JUST_BYTES, ENGLISH) == expected


def test_file_decimal():
    expected = TextCell(
        TextCellContents([fixed(66).paint("2.1"), fixed(77).bold().paint("M")]), 4
    )
    assert render_size(2_100_000, TestColours(), SizeFormat.DECIMAL_BYTES, ENGLISH) == expected


def test_file_binary():
    expected = TextCell(
        TextCellContents([fixed(66).paint("1.0"), fixed(77).bold().paint("Mi")]), 5
    )
    assert render_size(1_048_576, TestColours(), SizeFormat.BINARY_BYTES, ENGLISH) == expected


def test_file_bytes():
    expected = TextCell(TextCellContents([fixed(66).paint("1,048,576")]), 9)
    assert render_size(1_048_576, TestColours(), SizeFormat.JUST_BYTES, ENGLISH) == expected


def test_device_ids():
    expected = TextCell(
        TextCellContents(
            [BLUE.on(RED).paint("10"), GREEN.italic().paint(","), CYAN.on(YELLOW).paint("80")]
        ),
        5,
    )
    result = render_size(DeviceIDs(10, 80), TestColours(), SizeFormat.JUST_BYTES, ENGLISH)
    assert result == expected


def test_small_size_has_no_unit():
    result = render_size(999, TestColours(), SizeFormat.DECIMAL_BYTES, ENGLISH)
    assert result == TextCell.paint(fixed(66).normal(), "999")


def test_large_number_is_rounded_to_integer():
    result = render_size(123_456, TestColours(), SizeFormat.DECIMAL_BYTES, ENGLISH)
    assert result.strings() == TextCellContents(
        [fixed(66).paint("123"), fixed(77).bold().paint("k")]
    ).strings()
    assert result.width == 4


def test_just_bytes_uses_binary_prefix_for_style():
    small = render_size(10, PrefixColours(), SizeFormat.JUST_BYTES, ENGLISH)
    large = render_size(4096, PrefixColours(), SizeFormat.JUST_BYTES, ENGLISH)
    assert small.contents[0].style == fixed(1).normal()
    assert large.contents[0].style == fixed(2).normal()


def test_prefix_symbols():
    assert Prefix.KILO.symbol() == "k"
    assert Prefix.MEBI.symbol() == "Mi"