import pytest

from tilekit.ahk import AhkFunction, ahk_library, to_kebab_case


def test_kebab_case_splits_words():
    assert to_kebab_case("FocusWorkspace") == "focus-workspace"


def test_kebab_case_single_word():
    assert to_kebab_case("Stop") == "stop"


def test_kebab_case_is_lowercase_and_hyphen_joined():
    result = to_kebab_case("CycleMoveContainerToMonitor")
    assert result == result.lower()
    assert result.split("-")[0] == "cycle"
    assert len(result.split("-")) == 5


def test_generate_with_arguments():
    function = AhkFunction("Resize", ("edge", "sizing"))
    assert function.generate() == (
        "\nResize(edge, sizing) {\n    RunWait, komorebic.exe resize %edge% %sizing%, , Hide\n}"
    )


def test_generate_with_flags_puts_flags_after_arguments():
    function = AhkFunction("Start", (), ("ffm", "await_configuration"))
    text = function.generate()
    assert text.startswith("\nStart(ffm, await_configuration) {")
    assert "--ffm %ffm% --await-configuration %await_configuration%, , Hide" in text


def test_generate_mixed_arguments_and_flags():
    function = AhkFunction("Thing", ("a",), ("b_c",))
    text = function.generate()
    assert "Thing(a, b_c)" in text
    assert "%a% --b-c %b_c%" in text


def test_generate_without_arguments_keeps_spacing():
    text = AhkFunction("Retile").generate()
    assert "RunWait, komorebic.exe retile , , Hide" in text
    assert text.startswith("\nRetile() {")
    assert text.endswith("\n}")


def test_library_header_and_unit_entry():
    library = ahk_library(["Stop"])
    lines = library.split("\n")
    assert lines[0] == "; Generated by komorebic.exe"
    assert "    RunWait, komorebic.exe stop, , Hide" in lines
    assert "Stop() {" in lines


def test_library_includes_functions_in_order():
    first = AhkFunction("Focus", ("operation_direction",))
    second = AhkFunction("Move", ("operation_direction",))
    library = ahk_library([first, "Retile", second])
    assert library.index("Focus(") < library.index("Retile(") < library.index("Move(")
    assert first.generate() in library
    assert second.generate() in library


def test_empty_library_is_only_header():
    assert ahk_library([]) == "; Generated by komorebic.exe"


def test_invalid_name_rejected():
    with pytest.raises(ValueError):
        AhkFunction("not valid")


def test_invalid_argument_rejected():
    with pytest.raises(ValueError):
        AhkFunction("Focus", ("bad-name",))


def test_library_rejects_other_entries():
    with pytest.raises(TypeError):
        ahk_library([42])