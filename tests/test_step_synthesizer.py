import pytest

from models.diff import ChangeRun
from models.tour import StepKind
from services.language import LanguageClassifier
from services.step_synthesizer import StepSynthesizer


def make_run(**kwargs) -> ChangeRun:
    defaults = {"file_path": "src/app.py", "start_line": 5}
    defaults.update(kwargs)
    return ChangeRun(**defaults)


def test_new_file_produces_create_then_add_content():
    run = make_run(file_path="new.js", start_line=1, added_lines=["a", "b"], is_new_file=True)
    create, add = StepSynthesizer().synthesize(run)

    assert create.kind is StepKind.CREATE_FILE
    assert create.file is None and create.line is None and create.selection is None
    assert create.title == "Create new.js"
    assert "touch new.js" in create.description
    assert "type nul > new.js" in create.description

    assert add.kind is StepKind.ADD_CONTENT_TO_FILE
    assert add.file == "new.js"
    assert add.line == 1
    assert add.title == "Add content to new.js"
    assert "```javascript\na\nb\n```" in add.description


def test_new_file_without_content_is_a_single_create_step():
    run = make_run(file_path="empty.txt", deleted_lines=["?"], is_new_file=True)
    (step,) = StepSynthesizer().synthesize(run)

    assert step.kind is StepKind.CREATE_FILE
    assert step.title == "Create empty.txt"
    assert "```" not in step.description


def test_replacement_with_added_code():
    run = make_run(deleted_lines=["x = 1", "y = 22"], added_lines=["z = 3"])
    (step,) = StepSynthesizer().synthesize(run)

    assert step.kind is StepKind.REPLACEMENT
    assert step.file == "src/app.py"
    assert step.line is None
    assert step.selection.start.line == 5
    assert step.selection.end.line == 6
    assert step.selection.start.character == 1
    assert step.selection.end.character == len("y = 22") + 1
    assert step.description.startswith("Replace with:")
    assert "```python\nz = 3\n```" in step.description


def test_pure_deletion_has_notice_without_fence():
    run = make_run(deleted_lines=["gone"])
    (step,) = StepSynthesizer().synthesize(run)

    assert step.kind is StepKind.REPLACEMENT
    assert step.description == "Remove the selected code"


def test_pure_addition_targets_a_single_line():
    run = make_run(start_line=12, added_lines=["print('hi')"])
    (step,) = StepSynthesizer().synthesize(run)

    assert step.kind is StepKind.ADDITION
    assert step.line == 12
    assert step.selection is None
    assert step.title is None
    assert step.description == "Add the following:\n\n```python\nprint('hi')\n```"


@pytest.mark.parametrize("deleted", [["a"], ["a", "b"], ["a", "b", "c", "dddd"]])
def test_selection_spans_deleted_lines(deleted):
    run = make_run(deleted_lines=deleted, added_lines=["new"])
    selection = StepSynthesizer().selection_for(run)

    assert selection.end.line - selection.start.line == len(deleted) - 1


def test_zero_based_character_convention_applies_to_both_ends():
    run = make_run(deleted_lines=["abc"])
    selection = StepSynthesizer(character_base=0).selection_for(run)

    assert selection.start.character == 0
    assert selection.end.character == 3


def test_invalid_character_base_is_rejected():
    with pytest.raises(ValueError):
        StepSynthesizer(character_base=2)


def test_custom_classifier_controls_fence_language():
    synthesizer = StepSynthesizer(LanguageClassifier({"py": "py3"}))
    (step,) = synthesizer.synthesize(make_run(added_lines=["pass"]))

    assert "```py3\n" in step.description


def test_synthesize_all_keeps_order():
    runs = [
        make_run(file_path="a.txt", added_lines=["1"], is_new_file=True),
        make_run(file_path="b.txt", added_lines=["2"]),
    ]
    steps = list(StepSynthesizer().synthesize_all(runs))

    assert [step.kind for step in steps] == [
        StepKind.CREATE_FILE,
        StepKind.ADD_CONTENT_TO_FILE,
        StepKind.ADDITION,
    ]
