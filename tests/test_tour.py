import json

from models.tour import RevisionInfo, StepKind, TourStep
from services.tour_assembler import assemble_tour
from services.tour_service import parse_diff
from tests.diffs import PURE_DELETION, SCENARIO_A, SCENARIO_B, TWO_FILES, TWO_HUNKS

FROM = RevisionInfo(short_hash="abc1234", message="Initial commit")
TO = RevisionInfo(short_hash="def5678", message="Refactor parser")


def test_scenario_a_single_replacement():
    (step,) = parse_diff(SCENARIO_A)

    assert step.kind is StepKind.REPLACEMENT
    assert step.file == "file.txt"
    assert step.selection.start.line == 1
    assert step.selection.end.line == 1
    assert "```text\nnew content\n```" in step.description


def test_scenario_b_new_file_two_steps():
    create, add = parse_diff(SCENARIO_B)

    assert create.file is None
    assert create.title == "Create new.js"
    assert add.file == "new.js"
    assert add.line == 1
    assert "```javascript\nconst a = 1;\nconst b = 2;\n```" in add.description


def test_scenario_c_pure_deletion_notice():
    (step,) = parse_diff(PURE_DELETION)

    assert step.kind is StepKind.REPLACEMENT
    assert step.description == "Remove the selected code"
    assert "```" not in step.description


def test_scenario_d_two_hunks_two_steps():
    first, second = parse_diff(TWO_HUNKS)

    assert first.file == second.file == "main.rs"
    assert first.selection.start.line == 2
    assert second.line == 11


def test_scenario_e_empty_diff_still_has_title():
    tour = assemble_tour(parse_diff(""), FROM, TO)

    assert tour.steps == []
    assert tour.title == "Changes from abc1234 to def5678"
    assert tour.description


def test_steps_keep_file_order():
    steps = parse_diff(TWO_FILES)

    assert [step.file for step in steps] == ["a.py", "a.py", "b.md"]


def test_title_and_description_from_revisions():
    tour = assemble_tour([], FROM, TO)

    assert tour.title == "Changes from abc1234 to def5678"
    assert tour.description == (
        "Diff between commits:\n"
        "- From: abc1234 - Initial commit\n"
        "- To: def5678 - Refactor parser"
    )


def test_assembled_steps_are_verbatim():
    steps = [
        TourStep.addition(file="z.py", line=9, description="later"),
        TourStep.addition(file="a.py", line=1, description="earlier"),
    ]
    tour = assemble_tour(iter(steps), FROM, TO)

    assert tour.steps == steps


def test_json_omits_unset_step_fields():
    tour = assemble_tour(parse_diff(SCENARIO_A + SCENARIO_B), FROM, TO)
    data = json.loads(tour.to_json())

    assert set(data) == {"title", "description", "steps"}
    replacement, create, add = data["steps"]
    assert set(replacement) == {"file", "description", "selection"}
    assert replacement["selection"] == {
        "start": {"line": 1, "character": 1},
        "end": {"line": 1, "character": 12},
    }
    assert set(create) == {"description", "title"}
    assert set(add) == {"file", "line", "description", "title"}


def test_output_is_deterministic():
    first = assemble_tour(parse_diff(TWO_FILES), FROM, TO).to_json()
    second = assemble_tour(parse_diff(TWO_FILES), FROM, TO).to_json()

    assert first == second
