import pytest

from submarine.syntax import (
    SyntaxCheckError,
    completion,
    completion_score,
    first_illegal,
    middle_completion_score,
    syntax_score,
    total_syntax_score,
)

EXAMPLE = [
    "[({(<(())[]>[[{[]{<()<>>",
    "[(()[<>])]({[<{<<[]>>(",
    "{([(<{}[<>[]}>{[]{[(<()>",
    "(((({<>}<{<{<>}{[]{[]{}",
    "[[<[([]))<([[{}[[()]]]",
    "[{[{({}]{}}([{[{{{}}([]",
    "{<[[]]>}<{[{[{[]{()[[[]",
    "[<(<(<(<{}))><([]([]()",
    "<{([([[(<>()){}]>(<<{{",
    "<{([{{}}[<[[[<>{}]]]>[]]",
]


@pytest.mark.parametrize(
    ("line", "illegal"),
    [
        ("{([(<{}[<>[]}>{[]{[(<()>", "}"),
        ("[[<[([]))<([[{}[[()]]]", ")"),
        ("[{[{({}]{}}([{[{{{}}([]", "]"),
        ("[<(<(<(<{}))><([]([]()", ")"),
        ("<{([([[(<>()){}]>(<<{{", ">"),
    ],
)
def test_first_illegal_on_corrupted_lines(line, illegal):
    assert first_illegal(line) == illegal


def test_incomplete_line_has_no_illegal_character():
    assert first_illegal("[({(<(())[]>[[{[]{<()<>>") is None
    assert syntax_score("[({(<(())[]>[[{[]{<()<>>") == 0


def test_total_syntax_score_of_example():
    assert total_syntax_score(EXAMPLE) == 26397


def test_closer_on_empty_stack_is_illegal():
    assert first_illegal(")") == ")"
    assert syntax_score("]") == 57


def test_unknown_character_raises():
    with pytest.raises(SyntaxCheckError) as info:
        first_illegal("(a)")
    assert info.value.position == 1


@pytest.mark.parametrize(
    ("line", "closing", "score"),
    [
        ("[({(<(())[]>[[{[]{<()<>>", "}}]])})]", 288957),
        ("[(()[<>])]({[<{<<[]>>(", ")}>]})", 5566),
        ("(((({<>}<{<{<>}{[]{[]{}", "}}>}>))))", 1480781),
        ("{<[[]]>}<{[{[{[]{()[[[]", "]]}}]}]}>", 995444),
        ("<{([{{}}[<[[[<>{}]]]>[]]", "])}>", 294),
    ],
)
def test_completions_and_scores(line, closing, score):
    assert completion(line) == closing
    assert completion_score(closing) == score


def test_completion_closes_every_chunk():
    line = "[(()[<>])]({[<{<<[]>>("
    assert first_illegal(line + completion(line)) is None
    assert completion(line + completion(line)) == ""


def test_completion_of_corrupted_line_raises():
    with pytest.raises(SyntaxCheckError):
        completion("{([(<{}[<>[]}>{[]{[(<()>")


def test_middle_completion_score_of_example():
    assert middle_completion_score(EXAMPLE) == 288957


def test_middle_completion_score_without_incomplete_lines():
    with pytest.raises(ValueError):
        middle_completion_score(["(]", "<)"])