# === main.py ===
import enum
import logging
import os
import sys

from course_advisor.catalog import CourseCatalog
from course_advisor.config import configure_logging, load_config
from course_advisor.course import COURSE_NUMBER_LENGTH
from course_advisor.errors import (
    InvalidMenuChoice,
    InvalidSearchInput,
    LoadError,
)

logger = logging.getLogger(__name__)

MENU_TEXT = (
    "\n  /==============================\\\n"
    "  |  Menu                        |\n"
    "  |    1. Load Courses           |\n"
    "  |    2. Display Courses        |\n"
    "  |    3. Find Course by number  |\n"
    "  |    9. Exit                   |\n"
    "  \\==============================/\n"
)


class MenuChoice(enum.IntEnum):
    LOAD = 1
    DISPLAY = 2
    FIND = 3
    EXIT = 9


def parse_choice(text):
    text = text.strip()
    try:
        return MenuChoice(int(text))
    except ValueError:
        raise InvalidMenuChoice(text) from None


def normalize_course_number(text):
    # keys are matched exactly as the data file spells them
    number = text.strip()
    if len(number) != COURSE_NUMBER_LENGTH:
        raise InvalidSearchInput(text)
    return number


def print_error(*args):
    print(*args, file=sys.stderr)


class Driver:
    """Menu loop over a single CourseCatalog."""

    def __init__(self, csv_path, catalog=None, input_fn=input, output_fn=print,
                 error_fn=print_error):
        self.csv_path = csv_path
        self.catalog = catalog if catalog is not None else CourseCatalog()
        self.input = input_fn
        self.output = output_fn
        self.error = error_fn

    def read_choice(self):
        while True:
            self.output(MENU_TEXT)
            try:
                return parse_choice(self.input("Enter choice: "))
            except InvalidMenuChoice as e:
                self.error(str(e))

    def load_courses(self):
        try:
            count = self.catalog.load_file(self.csv_path)
        except LoadError as e:
            self.error(f"\nError: {e}")
            return
        self.output(f"\nLoaded {count} courses")

    def print_courses(self):
        if not self.catalog.loaded:
            self.output("\nNo courses loaded. Load courses first.")
            return
        self.output("\n  Here is a sample schedule:\n")
        for course in self.catalog.courses():
            self.output(course.summary())

    def search(self):
        text = self.input("What course do you want to know about? ")
        try:
            number = normalize_course_number(text)
        except InvalidSearchInput as e:
            self.error(f"\n{e}")
            return

        course = self.catalog.find(number)
        if course is None:
            self.output("\nNo matching course found.")
        else:
            self.output("")
            self.output(course.details())

    def run(self):
        self.output("Welcome to the course planner.")
        actions = {
            MenuChoice.LOAD: self.load_courses,
            MenuChoice.DISPLAY: self.print_courses,
            MenuChoice.FIND: self.search,
        }

        while True:
            try:
                choice = self.read_choice()
                if choice == MenuChoice.EXIT:
                    break
                actions[choice]()
            except EOFError:
                logger.debug("End of input, leaving menu loop")
                break

        self.output("\nThank you for using the course planner!\n")


USAGE = "usage: course-advisor [csv_path]"


def resolve_csv_path(argv, config, input_fn=input, output_fn=print, error_fn=print_error):
    """Return the data file path, or None when a supplied path cannot be read."""
    default = config["default_data_path"]
    if argv:
        path = argv[0]
    else:
        output_fn(f"Please enter the path to the csv data file [{default}]:")
        try:
            path = input_fn("").strip()
        except EOFError:
            path = ""
        if not path:
            return default

    if not (os.path.isfile(path) and os.access(path, os.R_OK)):
        error_fn(f"File {path} does not exist")
        return None
    return path


def main(argv=None, input_fn=input, output_fn=print, error_fn=print_error):
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) > 1:
        error_fn(USAGE)
        return 2

    config = load_config()
    configure_logging(config["log_level"])

    csv_path = resolve_csv_path(argv, config, input_fn, output_fn, error_fn)
    if csv_path is None:
        return 1

    driver = Driver(
        csv_path,
        catalog=CourseCatalog(delimiter=config["delimiter"]),
        input_fn=input_fn,
        output_fn=output_fn,
        error_fn=error_fn,
    )
    driver.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
