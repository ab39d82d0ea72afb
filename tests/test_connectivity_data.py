import pytest

from judgebox.connectivity_data import generate_case, main, write_case


def _decode(case):
    offset = 0
    decoded = []
    for (a, b), components in zip(case.queries, case.components):
        decoded.append(((a ^ offset) % case.n, (b ^ offset) % case.n))
        offset = (offset + components) & 0xFFFFFFFF
    return decoded


def test_generates_requested_number_of_queries():
    case = generate_case(5, 40, 3)
    assert len(case.queries) == 40
    assert len(case.log) == 40
    assert len(case.components) == 40


def test_no_query_decodes_to_equal_vertices():
    case = generate_case(3, 100, 7)
    assert all(x != y for x, y in _decode(case))


def test_answer_count_matches_question_queries():
    case = generate_case(6, 120, 4)
    questions = sum(1 for x, y in _decode(case) if x > y)
    assert len(case.answers) == questions


def test_component_counts_stay_in_range():
    case = generate_case(8, 150, 11)
    assert all(1 <= c <= 8 for c in case.components)


def test_same_seed_is_deterministic():
    first = generate_case(5, 30, 2)
    second = generate_case(5, 30, 2)
    assert len(first.queries) == 30
    assert first.queries == second.queries
    assert first.components == second.components
    assert first.answers == second.answers
    assert first.log == second.log


def test_too_few_vertices():
    with pytest.raises(ValueError):
        generate_case(1, 10, 1)


def test_write_case_files(tmp_path):
    case = generate_case(4, 25, 6)
    paths = write_case(case, tmp_path)
    names = {p.name for p in paths}
    assert names == {"input.txt", "output.txt", "log.txt", "fs.txt"}
    lines = (tmp_path / "input.txt").read_text().splitlines()
    assert lines[0] == "4 25"
    assert lines[1:] == [f"{a} {b}" for a, b in case.queries]
    log_lines = (tmp_path / "log.txt").read_text().splitlines()
    assert log_lines[1] == "#i\tF\tnC\ta\tb\tx\ty\tout"
    assert len(log_lines) == 27
    fs = (tmp_path / "fs.txt").read_text()
    assert fs == "".join(str(c) for c in case.components)


def test_main_prints_answers(tmp_path, capsys):
    assert main(["5", "20", "--seed", "3", "--directory", str(tmp_path)]) == 0
    expected = generate_case(5, 20, 3).answers
    assert capsys.readouterr().out == "".join(f"{int(v)}\n" for v in expected)
    assert (tmp_path / "output.txt").read_text() == "".join(f"{int(v)}\n" for v in expected)