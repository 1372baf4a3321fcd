# === catalog.py ===
import logging

from course_advisor.course import parse_course_line
from course_advisor.errors import FileInaccessible, LoadError, UnknownPrerequisite
from course_advisor.prerequisites import PrerequisiteSet
from course_advisor.tree import CourseTree

logger = logging.getLogger(__name__)


class CourseCatalog:
    def __init__(self, delimiter=","):
        self.delimiter = delimiter
        self.tree = CourseTree()
        self.prereqs = PrerequisiteSet()
        self.source = None

    @property
    def loaded(self):
        return self.source is not None

    def __len__(self):
        return len(self.tree)

    def clear(self):
        self.tree.clear()
        self.prereqs.clear()
        self.source = None

    def load_file(self, path):
        try:
            with open(path, encoding="utf-8-sig", newline="") as f:
                lines = f.readlines()
        except OSError as e:
            self.clear()
            logger.warning("Could not open %s: %s", path, e)
            raise FileInaccessible(path, e.strerror) from e
        except UnicodeDecodeError as e:
            self.clear()
            logger.warning("Could not decode %s: %s", path, e)
            raise FileInaccessible(path, "not a UTF-8 text file") from e
        return self._load(lines, source=str(path))

    def load_text(self, text, source="<text>"):
        return self._load(text.splitlines(keepends=True), source=source)

    def _load(self, lines, source):
        self.clear()
        try:
            count = self.load_courses(lines)
            self.check_prerequisites()
        except LoadError as e:
            self.clear()
            logger.warning("Rejected %s: %s", source, e)
            raise

        self.source = source
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Tree height after load: %d", self.tree.height())
        logger.info("Loaded %d courses from %s", count, source)
        return count

    def load_courses(self, lines):
        count = 0
        for i, line in enumerate(lines, 1):
            course = parse_course_line(line, line_number=i, delimiter=self.delimiter)
            if course is None:
                continue
            self.tree.insert(course)
            self.prereqs.update(course.prerequisites)
            count += 1
            logger.debug("Parsed %s with %d prerequisites", course.number, len(course.prerequisites))
        return count

    def check_prerequisites(self):
        # runs after the whole file so a course may name a prerequisite defined below it
        for number in self.prereqs.missing_from(self.tree):
            raise UnknownPrerequisite(number)

    def courses(self):
        return self.tree.in_order()

    def find(self, number):
        return self.tree.search(number)

    def exists(self, number):
        return self.tree.exists(number)
