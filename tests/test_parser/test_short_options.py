import pytest

from optscan.parser import (
    EndOfOptions,
    ErrorKind,
    OptionScanner,
    ScanCursor,
    ScanError,
    ScanState,
    ShortOption,
    scan_short,
)


def scanner_for(*tokens, spec="abco:", **kwargs):
    kwargs.setdefault("print_errors", False)
    return OptionScanner(["prog", *tokens], spec, **kwargs)


def test_single_option():
    """A lone option letter is returned once, then scanning ends."""
    scanner = scanner_for("-a")
    assert scanner.scan_short() == ShortOption("a")
    assert scanner.scan_short() == EndOfOptions()
    assert scanner.optind == 2


@pytest.mark.parametrize("char", ["a", "b", "c"])
def test_every_flag_letter(char):
    scanner = scanner_for(f"-{char}")
    result = scanner.scan_short()
    assert isinstance(result, ShortOption)
    assert result.char == char
    assert result.value is None
    assert isinstance(scanner.scan_short(), EndOfOptions)


def test_cluster_left_to_right():
    """Test the bundling of short options in the POSIX style."""
    scanner = scanner_for("-abc")
    assert scanner.scan_short() == ShortOption("a")
    assert scanner.cursor.state is ScanState.MID_CLUSTER
    assert scanner.cursor.sub_position == 2
    assert scanner.scan_short() == ShortOption("b")
    assert scanner.scan_short() == ShortOption("c")
    assert scanner.cursor.next_index == 2
    assert scanner.scan_short() == EndOfOptions()


def test_attached_value():
    scanner = scanner_for("-oVALUE")
    assert scanner.scan_short() == ShortOption("o", "VALUE")
    assert scanner.optarg == "VALUE"
    assert scanner.optind == 2


def test_separate_value():
    scanner = scanner_for("-o", "VALUE", "file")
    assert scanner.scan_short() == ShortOption("o", "VALUE")
    assert scanner.optind == 3
    assert scanner.scan_short() == EndOfOptions()
    assert scanner.operands == ["file"]


def test_value_option_ends_cluster():
    """Letters after a value-taking option are its value, not options."""
    scanner = scanner_for("-aobc")
    assert scanner.scan_short() == ShortOption("a")
    assert scanner.scan_short() == ShortOption("o", "bc")
    assert scanner.scan_short() == EndOfOptions()


def test_value_option_last_in_cluster_takes_next_token():
    scanner = scanner_for("-abo", "out.txt")
    assert scanner.scan_short() == ShortOption("a")
    assert scanner.scan_short() == ShortOption("b")
    assert scanner.scan_short() == ShortOption("o", "out.txt")
    assert scanner.optind == 3


def test_separate_value_may_look_like_an_option():
    scanner = scanner_for("-o", "-a")
    assert scanner.scan_short() == ShortOption("o", "-a")
    assert scanner.scan_short() == EndOfOptions()


def test_missing_value():
    scanner = scanner_for("-o")
    result = scanner.scan_short()
    assert isinstance(result, ScanError)
    assert result.kind is ErrorKind.MISSING_ARGUMENT
    assert result.option == "o"
    assert scanner.cursor.error_char == "o"
    assert scanner.cursor.sub_position == 1
    assert scanner.optind == 2
    assert scanner.scan_short() == EndOfOptions()


def test_unknown_option_makes_progress():
    scanner = scanner_for("-xa")
    result = scanner.scan_short()
    assert isinstance(result, ScanError)
    assert result.kind is ErrorKind.ILLEGAL_OPTION
    assert result.option == "x"
    assert result.code == "?"
    assert scanner.scan_short() == ShortOption("a")
    assert scanner.scan_short() == EndOfOptions()


def test_unknown_option_last_in_token_moves_to_next_token():
    scanner = scanner_for("-ax", "-b")
    assert scanner.scan_short() == ShortOption("a")
    assert isinstance(scanner.scan_short(), ScanError)
    assert scanner.optind == 2
    assert scanner.scan_short() == ShortOption("b")


def test_colon_is_never_an_option():
    scanner = scanner_for("-:")
    result = scanner.scan_short()
    assert isinstance(result, ScanError)
    assert result.option == ":"


def test_terminator_is_consumed():
    scanner = scanner_for("--", "-a")
    assert scanner.scan_short() == EndOfOptions()
    assert scanner.optind == 2
    assert scanner.operands == ["-a"]


def test_operand_stops_scanning():
    scanner = scanner_for("file", "-a")
    assert scanner.scan_short() == EndOfOptions()
    assert scanner.optind == 1
    assert scanner.operands == ["file", "-a"]


def test_single_dash_is_an_operand():
    scanner = scanner_for("-", "-a")
    assert scanner.scan_short() == EndOfOptions()
    assert scanner.operands == ["-", "-a"]


def test_empty_vector():
    scanner = OptionScanner(["prog"], "a", print_errors=False)
    assert scanner.scan_short() == EndOfOptions()
    assert scanner.operands == []


def test_end_state_is_idempotent():
    scanner = scanner_for("--", "-a")
    for _ in range(3):
        assert scanner.scan_short() == EndOfOptions()
    assert scanner.optind == 2
    assert scanner.cursor.state is ScanState.DONE


def test_reset_allows_reuse():
    scanner = scanner_for("-a")
    assert scanner.scan_short() == ShortOption("a")
    assert scanner.scan_short() == EndOfOptions()
    scanner.reset()
    assert scanner.scan_short() == ShortOption("a")


def test_long_shaped_token_is_illegal_for_short_scanner():
    scanner = scanner_for("--all")
    result = scanner.scan_short()
    assert isinstance(result, ScanError)
    assert result.option == "-"


def test_function_entry_point_threads_cursor():
    args = ["prog", "-ab", "-o", "x", "rest"]
    cursor = ScanCursor()
    seen = []
    while True:
        result = scan_short(args, "abo:", cursor, print_errors=False)
        if isinstance(result, EndOfOptions):
            break
        seen.append(result)
    assert seen == [ShortOption("a"), ShortOption("b"), ShortOption("o", "x")]
    assert cursor.next_index == 4
    assert args[cursor.next_index :] == ["rest"]


def test_independent_cursors_do_not_interfere():
    first = scanner_for("-ab")
    second = scanner_for("-c")
    assert first.scan_short() == ShortOption("a")
    assert second.scan_short() == ShortOption("c")
    assert first.scan_short() == ShortOption("b")
    assert second.scan_short() == EndOfOptions()
