from course_advisor.config import AdvisorConfig
from course_advisor.issues import LoadTally
from course_advisor.loader import CourseAdvisor, load_courses
from course_advisor.main import run_menu
from course_advisor.report import format_course, format_summary


def scripted(*answers):
    answers = iter(answers)

    def read(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    return read


def test_format_summary_lines():
    summary = LoadTally()
    summary.lines_read = 3
    summary.add_issue("MissingField", "Empty course number", 2)
    summary.add_issue("Cycle", "Cycle detected: A -> B -> A")
    summary.add_issue("Timing", "Load completed in 0 ms")
    text = format_summary(summary.freeze())
    assert "Lines read:        3" in text
    assert "* [line 2] MissingField: Empty course number" in text
    assert "* Cycle: Cycle detected: A -> B -> A" in text
    assert "* Load completed in 0 ms" in text


def test_format_course(course_file):
    _, catalog = load_courses(course_file("CS200,Data Structures,CS100", "CS100,Intro"))
    assert format_course(catalog, "cs200") == (
        "CS200, Data Structures\nPrerequisites: CS100\n  - CS100: Intro"
    )
    assert format_course(catalog, "cs100") == "CS100, Intro\nPrerequisites: None"
    assert format_course(catalog, " cs999 ") == "Course not found: CS999"


def test_format_course_with_excluded_prereq(course_file):
    # C is explored first and stays gray when A -> B -> A is found under it
    _, catalog = load_courses(course_file("C,TitleC,A", "A,TitleA,B", "B,TitleB,A"))
    assert catalog.lookup("C") is not None
    assert format_course(catalog, "C") == (
        "C, TitleC\nPrerequisites: A (Not found)\n  - A: [Title not found]"
    )


def test_menu_gates_until_load(capsys):
    run_menu(CourseAdvisor(), scripted("2", "3", "9"))
    out = capsys.readouterr().out
    assert out.count("Please load the data structure first (option 1).") == 2
    assert "Thank you for using the course planner!" in out


def test_menu_load_list_and_lookup(course_file, capsys):
    path = course_file("CS200,Data Structures,CS100", "CS100,Intro")
    run_menu(CourseAdvisor(), scripted("1", path, "2", "3", "cs200", "3", "", "9"))
    out = capsys.readouterr().out
    assert "=== Load Summary ===" in out
    assert "Inserted:          2" in out
    assert "CS100, Intro\nCS200, Data Structures" in out
    assert "Prerequisites: CS100" in out
    assert "(cancelled)" in out


def test_menu_help_invalid_and_empty_path(capsys):
    run_menu(CourseAdvisor(), scripted("h", "?", "7", "1", "  "))
    out = capsys.readouterr().out
    assert out.count("Help:") == 2
    assert "7 is not a valid option." in out
    assert "File name cannot be empty." in out


def test_menu_export(course_file, tmp_path, capsys):
    config = AdvisorConfig(duckdb_path=str(tmp_path / "catalog.duckdb"))
    path = course_file("CS100,Intro")
    run_menu(CourseAdvisor(config), scripted("1", path, "4", "9"))
    out = capsys.readouterr().out
    assert "Exported 1 courses and 0 prerequisites" in out
    assert (tmp_path / "catalog.duckdb").exists()


def test_menu_survives_failed_export(course_file, tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    config = AdvisorConfig(duckdb_path=str(blocker / "catalog.duckdb"))
    run_menu(CourseAdvisor(config), scripted("1", course_file("CS100,Intro"), "4", "9"))
    out = capsys.readouterr().out
    assert "[ERROR] Export to" in out
    assert "Thank you for using the course planner!" in out


def test_menu_prints_export(course_file, tmp_path, capsys):
    config = AdvisorConfig(duckdb_path=str(tmp_path / "catalog.duckdb"))
    path = course_file("CS200,Data Structures,CS100", "CS100,Intro")
    run_menu(CourseAdvisor(config), scripted("1", path, "4", "5", "9"))
    out = capsys.readouterr().out
    assert "=== COURSES ===" in out
    assert "('CS200', 'CS100', 0)" in out


def test_menu_print_export_without_file(tmp_path, capsys):
    config = AdvisorConfig(duckdb_path=str(tmp_path / "missing.duckdb"))
    run_menu(CourseAdvisor(config), scripted("5", "9"))
    out = capsys.readouterr().out
    assert "[ERROR] Could not read" in out
    assert "Thank you for using the course planner!" in out
