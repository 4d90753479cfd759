import io

import pytest

from segdeque.element_types import Complex, ComplexType, DoubleType, FunctionType, IntType, PersonType, StringType
from segdeque.menu import DequeWrapper, MenuDeque, MenuError, evaluate_predicate, main, parse_value
from segdeque.segmented_deque import SegmentedDeque


def run(menu, *lines):
    out = io.StringIO()
    for line in lines:
        menu.process_command(line, out)
    return out.getvalue()


def contents(menu, name):
    return list(menu.deques[name].deque)


def test_parse_value_int():
    assert parse_value("42", IntType()) == 42
    assert parse_value("-7", IntType()) == -7


def test_parse_value_double():
    assert parse_value("2.5", DoubleType()) == 2.5


def test_parse_value_string_and_person():
    assert parse_value("hello", StringType()) == "hello"
    assert parse_value("Alice", PersonType()) == "Alice"


def test_parse_value_complex():
    assert parse_value("1.5,-2", ComplexType()) == Complex(1.5, -2.0)


def test_parse_value_complex_without_comma():
    with pytest.raises(MenuError, match="INVALID COMPLEX FORMAT"):
        parse_value("1.5", ComplexType())


def test_parse_value_functions():
    func = parse_value("inc2", FunctionType())
    assert func(5) == 7
    assert parse_value("inc1", FunctionType())(0) == 1
    assert parse_value("inc3", FunctionType())(1) == 4


def test_parse_value_unknown_function():
    with pytest.raises(MenuError, match="UNKNOWN FUNCTION NAME: dec"):
        parse_value("dec", FunctionType())


def test_parse_value_invalid_int():
    with pytest.raises(ValueError):
        parse_value("abc", IntType())


@pytest.mark.parametrize(
    "op,reference,item,expected",
    [("==", 3, 3, True), ("==", 3, 4, False), (">", 3, 4, True), (">", 3, 2, False), ("<", 3, 2, True), ("<", 3, 3, False)],
)
def test_evaluate_predicate(op, reference, item, expected):
    assert evaluate_predicate(op, reference, item) is expected


def test_evaluate_predicate_unknown():
    with pytest.raises(MenuError, match="UNKNOWN PREDICATE OPERATION"):
        evaluate_predicate("!=", 1, 2)


def test_wrapper_push_pop_and_format():
    wrapper = DequeWrapper(IntType())
    wrapper.push_back(2)
    wrapper.push_front(1)
    wrapper.push_back(3)
    assert len(wrapper) == 3
    assert wrapper.front() == 1
    assert wrapper.back() == 3
    assert wrapper.format() == "1 2 3 \n"
    wrapper.pop_front()
    wrapper.pop_back()
    assert list(wrapper.deque) == [2]


def test_wrapper_empty_format():
    assert DequeWrapper(StringType()).format() == "\n"


def test_wrapper_sort_and_clear():
    wrapper = DequeWrapper(IntType())
    for value in [5, 1, 4, 2]:
        wrapper.push_back(value)
    wrapper.sort()
    assert list(wrapper.deque) == [1, 2, 4, 5]
    wrapper.clear()
    assert len(wrapper) == 0


def test_wrapper_uses_given_deque():
    deque = SegmentedDeque(2)
    for value in [1, 2, 3]:
        deque.push_back(value)
    wrapper = DequeWrapper(IntType(), deque)
    assert list(wrapper.deque) == [1, 2, 3]


def test_wrapper_concat_and_merge_keep_sources():
    left = DequeWrapper(IntType())
    right = DequeWrapper(IntType())
    left.push_back(1)
    right.push_back(2)
    joined = left.concat(right)
    merged = left.merge(right)
    assert list(joined.deque) == [1, 2]
    assert list(merged.deque) == [1, 2]
    assert list(left.deque) == [1]
    assert len(right) == 1


def test_wrapper_concat_type_mismatch():
    with pytest.raises(MenuError):
        DequeWrapper(IntType()).concat(DequeWrapper(StringType()))


def test_wrapper_where_and_map():
    wrapper = DequeWrapper(IntType())
    for value in [1, 2, 3, 4]:
        wrapper.push_back(value)
    evens = wrapper.where(lambda x: x % 2 == 0)
    assert list(evens.deque) == [2, 4]
    scaled = wrapper.map("3")
    assert list(scaled.deque) == [x * 3 for x in [1, 2, 3, 4]]
    assert list(wrapper.deque) == [1, 2, 3, 4]


def test_wrapper_map_string_repeats():
    wrapper = DequeWrapper(StringType())
    wrapper.push_back("ab")
    assert list(wrapper.map("2").deque) == ["ab" * 2]


def test_wrapper_map_person_unsupported():
    wrapper = DequeWrapper(PersonType())
    wrapper.push_back("Bob")
    with pytest.raises(TypeError):
        wrapper.map("2")


def test_create_reports_and_selects():
    menu = MenuDeque()
    assert run(menu, "CREATE a INT") == "DEQUE 'a' CREATED.\n"
    assert menu.active == "a"


def test_create_unknown_type():
    assert run(MenuDeque(), "CREATE a BOOL") == "ERROR: UNKNOWN TYPE: BOOL\n"


def test_unknown_command():
    assert run(MenuDeque(), "FOO") == "ERROR: UNKNOWN COMMAND: FOO\n"


def test_select_missing():
    assert run(MenuDeque(), "SELECT nope") == "ERROR: DEQUE NOT FOUND\n"


def test_select_existing():
    menu = MenuDeque()
    run(menu, "CREATE a INT", "CREATE b INT")
    assert run(menu, "SELECT a") == "SELECTED DEQUE: a\n"
    assert menu.active == "a"


def test_list_is_sorted():
    menu = MenuDeque()
    run(menu, "CREATE b INT", "CREATE a STRING")
    assert run(menu, "LIST") == "CREATED DEQUES:\n  a\n  b\n"


def test_push_and_print():
    menu = MenuDeque()
    output = run(menu, "CREATE a INT", "PUSH_BACK 2", "PUSH_FRONT 1", "PUSH_BACK 3")
    assert "PUSHED TO BACK: 2\n" in output
    assert "PUSHED TO FRONT: 1\n" in output
    assert run(menu, "PRINT") == "DEQUE CONTENTS: 1 2 3 \n"


def test_push_complex_formats():
    menu = MenuDeque()
    output = run(menu, "CREATE c COMPLEX", "PUSH_BACK 1,2")
    assert output.endswith("PUSHED TO BACK: (1 + 2i)\n")


def test_push_invalid_complex_reports_error():
    menu = MenuDeque()
    output = run(menu, "CREATE c COMPLEX", "PUSH_BACK 12")
    assert output.endswith("ERROR: INVALID COMPLEX FORMAT. EXPECTED FORMAT: REAL,IMAG\n")
    assert contents(menu, "c") == []


def test_pop_front_and_back():
    menu = MenuDeque()
    run(menu, "CREATE a INT", "PUSH_BACK 1", "PUSH_BACK 2", "PUSH_BACK 3")
    assert run(menu, "POP_FRONT") == "POPPED FROM FRONT: 1\n"
    assert run(menu, "POP_BACK") == "POPPED FROM BACK: 3\n"
    assert contents(menu, "a") == [2]


def test_pop_empty_reports_error_after_prefix():
    menu = MenuDeque()
    run(menu, "CREATE a INT")
    output = run(menu, "POP_FRONT")
    assert output.startswith("POPPED FROM FRONT: ERROR: ")


def test_command_without_active_deque():
    assert run(MenuDeque(), "PRINT").startswith("ERROR: ")


def test_sort_command():
    menu = MenuDeque()
    run(menu, "CREATE a INT", "PUSH_BACK 3", "PUSH_BACK 1", "PUSH_BACK 2")
    assert run(menu, "SORT") == "DEQUE SORTED.\n"
    assert contents(menu, "a") == [1, 2, 3]


def test_concat_command():
    menu = MenuDeque()
    run(menu, "CREATE b INT", "PUSH_BACK 9", "CREATE a INT", "PUSH_BACK 1")
    assert run(menu, "CONCAT b") == "CONCATENATED a WITH b INTO a_CONCAT\n"
    assert contents(menu, "a_CONCAT") == [1, 9]
    assert menu.active == "a"


def test_concat_missing():
    menu = MenuDeque()
    run(menu, "CREATE a INT")
    assert run(menu, "CONCAT zz") == "ERROR: DEQUE NOT FOUND: zz\n"


def test_merge_command():
    menu = MenuDeque()
    run(menu, "CREATE b STRING", "PUSH_BACK y", "CREATE a STRING", "PUSH_BACK x")
    assert run(menu, "MERGE b") == "MERGED a WITH b INTO a_MERGED\n"
    assert contents(menu, "a_MERGED") == ["x", "y"]


def test_where_command():
    menu = MenuDeque()
    run(menu, "CREATE a INT", "PUSH_BACK 1", "PUSH_BACK 5", "PUSH_BACK 3")
    assert run(menu, "WHERE > 2") == "FILTER APPLIED. NEW DEQUE: a_FILTERED\n"
    assert contents(menu, "a_FILTERED") == [5, 3]


def test_where_unknown_operation():
    menu = MenuDeque()
    run(menu, "CREATE a INT", "PUSH_BACK 1")
    assert run(menu, "WHERE ~ 2") == "ERROR: UNKNOWN PREDICATE OPERATION\n"
    assert "a_FILTERED" not in menu.deques


def test_map_command():
    menu = MenuDeque()
    run(menu, "CREATE a INT", "PUSH_BACK 2", "PUSH_BACK 4")
    assert run(menu, "MAP 10") == "MAPPED WITH OPERATION: 10. NEW DEQUE: a_MAPPED\n"
    assert contents(menu, "a_MAPPED") == [20, 40]
    assert contents(menu, "a") == [2, 4]


def test_map_function_deque_reports_error():
    menu = MenuDeque()
    run(menu, "CREATE f FUNCTION", "PUSH_BACK inc1")
    assert run(menu, "MAP 2").startswith("ERROR: Multiplication operation not supported")


def test_main_processes_file(tmp_path):
    source = tmp_path / "commands.txt"
    target = tmp_path / "results.txt"
    source.write_text("CREATE a INT\n# comment\n\nPUSH_BACK 4\nPRINT\n", encoding="utf-8")
    assert main(["--input", str(source), "--output", str(target)]) == 0
    assert target.read_text(encoding="utf-8") == (
        "DEQUE 'a' CREATED.\n\nPUSHED TO BACK: 4\n\nDEQUE CONTENTS: 4 \n\n"
    )


def test_main_missing_input(tmp_path):
    missing = tmp_path / "absent.txt"
    target = tmp_path / "results.txt"
    assert main(["--input", str(missing), "--output", str(target)]) == 1
    assert not target.exists()