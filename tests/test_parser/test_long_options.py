import pytest

from optscan.parser import (
    EndOfOptions,
    ErrorKind,
    FlagSet,
    FlagTarget,
    HasArgument,
    LongOption,
    LongOptionMatch,
    OptionScanner,
    ScanCursor,
    ScanError,
    ShortOption,
    scan_long,
)


@pytest.fixture
def verbose_flag():
    return FlagTarget("verbose", value=0)


@pytest.fixture
def long_options(verbose_flag):
    return [
        LongOption("name", HasArgument.REQUIRED),
        LongOption("color", HasArgument.OPTIONAL, code="C"),
        LongOption("all", HasArgument.NONE, code="a"),
        LongOption("verbose", HasArgument.NONE, flag=verbose_flag, code=1),
    ]


@pytest.fixture
def make_scanner(long_options):
    def _make(*tokens, spec="ab:"):
        return OptionScanner(["prog", *tokens], spec, long_options, print_errors=False)

    return _make


def test_inline_value(make_scanner):
    scanner = make_scanner("--name=value")
    assert scanner.scan_long() == LongOptionMatch("name", "name", "value", 0)
    assert scanner.optind == 2
    assert scanner.scan_long() == EndOfOptions()


def test_separate_value(make_scanner):
    scanner = make_scanner("--name", "value", "file")
    assert scanner.scan_long() == LongOptionMatch("name", "name", "value", 0)
    assert scanner.optind == 3
    assert scanner.scan_long() == EndOfOptions()
    assert scanner.operands == ["file"]


def test_empty_inline_value(make_scanner):
    scanner = make_scanner("--name=", "next")
    result = scanner.scan_long()
    assert result.value == ""
    assert scanner.optind == 2


def test_inline_value_keeps_later_equals(make_scanner):
    scanner = make_scanner("--name=a=b")
    assert scanner.scan_long().value == "a=b"


def test_missing_required_value(make_scanner):
    scanner = make_scanner("--name")
    result = scanner.scan_long()
    assert isinstance(result, ScanError)
    assert result.kind is ErrorKind.MISSING_LONG_ARGUMENT
    assert result.option == "name"
    assert scanner.optind == 2
    assert scanner.scan_long() == EndOfOptions()


def test_optional_value(make_scanner):
    scanner = make_scanner("--color=red", "--color", "blue")
    assert scanner.scan_long() == LongOptionMatch("color", "C", "red", 1)
    assert scanner.scan_long() == LongOptionMatch("color", "C", None, 1)
    assert scanner.scan_long() == EndOfOptions()
    assert scanner.operands == ["blue"]


def test_no_argument_ignores_inline_value(make_scanner):
    scanner = make_scanner("--all=yes")
    result = scanner.scan_long()
    assert result == LongOptionMatch("all", "a", None, 2)
    assert scanner.optind == 2


def test_flag_target_is_written(make_scanner, verbose_flag):
    scanner = make_scanner("--verbose")
    result = scanner.scan_long()
    assert isinstance(result, FlagSet)
    assert result.code == 0
    assert result.stored == 1
    assert verbose_flag.value == 1


def test_match_index_is_recorded(make_scanner):
    scanner = make_scanner("--all", "--color")
    scanner.scan_long()
    assert scanner.cursor.long_index == 2
    scanner.scan_long()
    assert scanner.cursor.long_index == 1


def test_unrecognized_option(make_scanner):
    scanner = make_scanner("--bogus", "-a")
    result = scanner.scan_long()
    assert isinstance(result, ScanError)
    assert result.kind is ErrorKind.UNRECOGNIZED_LONG_OPTION
    assert result.option == "bogus"
    assert scanner.optind == 2
    assert scanner.scan_long() == ShortOption("a")


def test_abbreviations_are_not_matched(make_scanner):
    scanner = make_scanner("--verb")
    result = scanner.scan_long()
    assert isinstance(result, ScanError)
    assert result.option == "verb"


def test_longer_name_is_not_matched(make_scanner):
    scanner = make_scanner("--names")
    assert isinstance(scanner.scan_long(), ScanError)


def test_equals_only_is_unrecognized(make_scanner):
    scanner = make_scanner("--=value")
    result = scanner.scan_long()
    assert isinstance(result, ScanError)
    assert result.option == ""
    assert result.token == "=value"


def test_mixed_short_and_long(make_scanner):
    scanner = make_scanner("-a", "--all", "-ab", "3", "--name", "n", "--", "-a")
    results = []
    while not isinstance(result := scanner.scan_long(), EndOfOptions):
        results.append(result)
    assert results == [
        ShortOption("a"),
        LongOptionMatch("all", "a", None, 2),
        ShortOption("a"),
        ShortOption("b", "3"),
        LongOptionMatch("name", "name", "n", 0),
    ]
    assert scanner.operands == ["-a"]


def test_cluster_continues_through_scan_long(make_scanner):
    scanner = make_scanner("-aa", "--all")
    assert scanner.scan_long() == ShortOption("a")
    assert scanner.scan_long() == ShortOption("a")
    assert scanner.scan_long() == LongOptionMatch("all", "a", None, 2)


def test_terminator(make_scanner):
    scanner = make_scanner("--", "-x")
    assert scanner.scan_long() == EndOfOptions()
    assert scanner.operands == ["-x"]
    assert scanner.scan_long() == EndOfOptions()


def test_without_long_table():
    scanner = OptionScanner(["prog", "--name"], "a", print_errors=False)
    result = scanner.scan_long()
    assert isinstance(result, ScanError)
    assert result.kind is ErrorKind.UNRECOGNIZED_LONG_OPTION


def test_function_entry_point(long_options):
    cursor = ScanCursor()
    args = ["prog", "--name", "x", "-a"]
    assert scan_long(args, "a", long_options, cursor) == LongOptionMatch(
        "name", "name", "x", 0
    )
    assert scan_long(args, "a", long_options, cursor) == ShortOption("a")
    assert scan_long(args, "a", long_options, cursor) == EndOfOptions()
    assert cursor.next_index == 4
