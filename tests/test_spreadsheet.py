import io

import pytest

from codingame_bots.spreadsheet import (
    Cell,
    Operation,
    Ref,
    evaluate,
    main,
    parse_arg,
    parse_cell,
)


def cells(*lines):
    return [parse_cell(line) for line in lines]


def test_parse_arg_reference():
    assert parse_arg("$2") == Ref(2)


def test_parse_arg_empty():
    assert parse_arg("_") is None


def test_parse_arg_number():
    assert parse_arg("-7") == -7


def test_parse_arg_blank_raises():
    with pytest.raises(ValueError):
        parse_arg("  ")


def test_parse_cell():
    assert parse_cell("ADD $0 4") == Cell(Operation.ADD, Ref(0), 4)


def test_parse_cell_unknown_operation():
    with pytest.raises(ValueError):
        parse_cell("DIV 1 2")


def test_parse_cell_wrong_arity():
    with pytest.raises(ValueError):
        parse_cell("VALUE 1")


def test_single_value():
    assert evaluate(cells("VALUE 5 _")) == [5]


def test_reference_to_earlier_cell():
    assert evaluate(cells("VALUE 3 _", "ADD $0 4")) == [3, 7]


def test_forward_references_are_resolved():
    assert evaluate(cells("VALUE $1 _", "VALUE $2 _", "VALUE 9 _")) == [9, 9, 9]


def test_add_and_mult_agree_on_doubling():
    result = evaluate(cells("VALUE 21 _", "ADD $0 $0", "MULT $0 2"))
    assert result[1] == result[2]


def test_sub_apply():
    assert Operation.SUB.apply(10, 4) == 6


def test_mult_apply():
    assert Operation.MULT.apply(3, 4) == 12


def test_missing_second_argument_raises():
    with pytest.raises(ValueError):
        Operation.ADD.apply(1, None)


def test_cycle_raises():
    with pytest.raises(ValueError):
        evaluate(cells("ADD $1 1", "ADD $0 1"))


def test_reference_out_of_range_raises():
    with pytest.raises(ValueError):
        evaluate(cells("VALUE $5 _"))


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\nVALUE $1 _\nVALUE $2 _\nVALUE 9 _\n"))
    main()
    assert capsys.readouterr().out == "9\n9\n9\n"