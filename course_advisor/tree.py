# === tree.py ===
from typing import Iterator, Optional

from course_advisor.course import Course
from course_advisor.errors import DuplicateCourseNumber


class Node:
    __slots__ = ("course", "left", "right")

    def __init__(self, course: Course):
        self.course = course
        self.left: Optional["Node"] = None   # smaller course numbers
        self.right: Optional["Node"] = None  # larger course numbers


class CourseTree:
    """
    Unbalanced binary search tree of courses keyed by course number.

    Course numbers compare as plain strings, so iteration is alphanumeric.
    """

    def __init__(self):
        self.root: Optional[Node] = None
        self._size = 0

    def __len__(self):
        return self._size

    def __bool__(self):
        return self.root is not None

    def __iter__(self) -> Iterator[Course]:
        return self.in_order()

    def __contains__(self, number):
        return self.exists(number)

    def insert(self, course: Course) -> None:
        if self.root is None:
            self.root = Node(course)
            self._size = 1
            return

        node = self.root
        while True:
            if course.number == node.course.number:
                raise DuplicateCourseNumber(course.number)
            if course.number < node.course.number:
                if node.left is None:
                    node.left = Node(course)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(course)
                    break
                node = node.right
        self._size += 1

    def search(self, number: str) -> Optional[Course]:
        node = self.root
        while node is not None:
            if number == node.course.number:
                return node.course
            node = node.left if number < node.course.number else node.right
        return None

    def exists(self, number: str) -> bool:
        return self.search(number) is not None

    def in_order(self) -> Iterator[Course]:
        # explicit stack; sorted input turns the tree into one long right spine
        stack = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.course
            node = node.right

    def height(self) -> int:
        if self.root is None:
            return 0
        best = 0
        stack = [(self.root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return best

    def clear(self) -> None:
        # nodes own their children, so dropping the root releases everything
        self.root = None
        self._size = 0
