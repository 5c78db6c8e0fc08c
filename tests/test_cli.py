from __future__ import annotations

import pytest

from algebra_cli import main


def test_cli_eval_prints_normal_form_and_steps(capsys):
    main(["eval", "--text", "4 / 2 + 5 - 9", "--steps"])

    out = capsys.readouterr().out
    assert "(-2)" in out
    assert "4 / 2 = 2" in out
    assert "7 - 9 = -2" in out


def test_cli_render_typeset(capsys):
    main(["render", "--text", "x / (y * 2)", "--typeset"])

    assert capsys.readouterr().out == "\\frac{x}{y \\cdot 2}\n"


def test_cli_render_infix(capsys):
    main(["render", "--text", "-x * 3"])

    assert capsys.readouterr().out == "((-x) * 3)\n"


def test_cli_parse_json(capsys):
    main(["parse", "--text", "7", "--json"])

    out = capsys.readouterr().out
    assert '"node_type": "int"' in out
    assert '"value": 7' in out


def test_cli_syntax_error_exits_with_status_1(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["eval", "--text", "(1 + 2"])

    assert exc_info.value.code == 1
    assert "Błąd składni" in capsys.readouterr().err


def test_cli_equiv(capsys):
    main(["equiv", "x + x", "2 * x", "--seed", "4"])

    assert "yes" in capsys.readouterr().out


def test_cli_equiv_mismatch_exits_with_status_2(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["equiv", "x", "x + 1", "--seed", "4", "--trials", "2"])

    assert exc_info.value.code == 2
    out = capsys.readouterr().out
    assert "counterexample" in out


def test_cli_equiv_rejects_zero_trials(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["equiv", "x", "x", "--trials", "0"])

    assert exc_info.value.code == 1
    assert "trials must be >= 1" in capsys.readouterr().err


def test_cli_equiv_handles_values_beyond_float_range(capsys):
    huge = "9" * 400
    main(["equiv", huge, huge, "--seed", "1"])

    assert "yes" in capsys.readouterr().out
