import pytest

from course_advisor.catalog import CourseCatalog

SAMPLE_CSV = (
    "MATH201,Discrete Mathematics\n"
    "CSCI300,Introduction to Algorithms,CSCI200,MATH201\n"
    "CSCI350,Operating Systems,CSCI300\n"
    "CSCI101,Introduction to Programming in C++,CSCI100\n"
    "CSCI100,Introduction to Computer Science\n"
    "CSCI301,Advanced Programming in C++,CSCI101\n"
    "CSCI400,Large Software Development,CSCI301,CSCI350\n"
    "CSCI200,Data Structures,CSCI101\n"
)


@pytest.fixture
def sample_csv():
    return SAMPLE_CSV


@pytest.fixture
def catalog(sample_csv):
    """A catalog already loaded with the sample courses."""
    catalog = CourseCatalog()
    catalog.load_text(sample_csv)
    return catalog


@pytest.fixture
def csv_file(tmp_path, sample_csv):
    path = tmp_path / "courses.csv"
    path.write_text(sample_csv)
    return path
