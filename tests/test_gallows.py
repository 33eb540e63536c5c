import pytest

from forca.gallows import MAX_ERRORS, main, render_gallows, render_large_gallows

STAGES = range(MAX_ERRORS + 1)


@pytest.mark.parametrize("render", [render_gallows, render_large_gallows])
def test_out_of_range_renders_nothing(render):
    assert render(-1) == ""
    assert render(MAX_ERRORS + 1) == ""


def test_small_empty_gallows_top():
    out = render_gallows(0)
    assert out.startswith("\n -----------\n|           |")
    assert "0" not in out


def test_small_gallows_line_count():
    assert len(render_gallows(0).split("\n")[1:]) == 8


@pytest.mark.parametrize("render", [render_gallows, render_large_gallows])
def test_every_stage_has_same_number_of_lines(render):
    counts = {render(errors).count("\n") for errors in STAGES}
    assert len(counts) == 1


@pytest.mark.parametrize("render", [render_gallows, render_large_gallows])
def test_each_stage_differs_from_previous(render):
    drawings = [render(errors) for errors in STAGES]
    assert len(set(drawings)) == len(drawings)


@pytest.mark.parametrize("render", [render_gallows, render_large_gallows])
def test_stages_share_top_beam(render):
    top = render(0).split("\n")[1:3]
    for errors in STAGES:
        assert render(errors).split("\n")[1:3] == top


def test_small_head_and_body():
    assert "\n|           0" in render_gallows(1)
    assert "\n|         --|--" in render_gallows(4)


def test_small_final_stage_message():
    out = render_gallows(6)
    assert "\n|          / \\" in out
    assert "\n|     Pergeu o jogo!" in out
    assert out.endswith("\n-")


def test_large_gallows_shape():
    out = render_large_gallows(0)
    assert out.startswith("\n-----------------\n|               |")
    assert out.endswith("\n__")
    assert len(out.split("\n")[1:]) == 11


def test_large_final_stage_message():
    out = render_large_gallows(6)
    assert "\n|               O" in out
    assert "\n|              / \\" in out
    assert "\n|       PERDEU O JOGO" in out
    assert "PERDEU" not in render_large_gallows(5)


def test_main_prints_two_errors_by_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == render_large_gallows(2)


def test_main_takes_error_count(capsys):
    assert main(["5"]) == 0
    assert capsys.readouterr().out == render_large_gallows(5)


def test_main_rejects_non_number(capsys):
    assert main(["abc"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "abc" in captured.err