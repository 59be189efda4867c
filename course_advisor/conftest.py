import pytest


@pytest.fixture
def course_file(tmp_path):
    """Writes the given lines to a course file and returns its path."""

    def write(*lines, name="courses.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)

    return write
