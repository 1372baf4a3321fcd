from course_advisor.prerequisites import PrerequisiteSet
from course_advisor.tree import CourseTree
from course_advisor.course import Course


def test_add_is_idempotent():
    prereqs = PrerequisiteSet()
    for _ in range(3):
        prereqs.add("CSCI101")
    prereqs.add("MATH201")

    assert len(prereqs) == 2
    assert list(prereqs) == ["CSCI101", "MATH201"]


def test_update_and_contains():
    prereqs = PrerequisiteSet()
    prereqs.update(["CSCI300", "CSCI101", "CSCI300"])

    assert "CSCI300" in prereqs
    assert "CSCI999" not in prereqs
    assert len(prereqs) == 2


def test_no_entries_lost_for_many_numbers():
    prereqs = PrerequisiteSet()
    numbers = [f"CSCI{i:03d}" for i in range(1000)]
    prereqs.update(numbers)
    prereqs.update(numbers)

    assert len(prereqs) == 1000
    assert list(prereqs) == numbers


def test_clear():
    prereqs = PrerequisiteSet()
    prereqs.add("CSCI101")
    prereqs.clear()
    assert len(prereqs) == 0
    assert list(prereqs) == []


def test_missing_from_tree():
    tree = CourseTree()
    tree.insert(Course(number="CSCI100", title="Intro"))
    prereqs = PrerequisiteSet()
    prereqs.update(["CSCI100", "MATH201", "CSCI050"])

    assert list(prereqs.missing_from(tree)) == ["CSCI050", "MATH201"]
