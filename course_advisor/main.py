# === main.py ===
import argparse
import logging
import time

import duckdb

from course_advisor.config import load_config
from course_advisor.export_duckdb import export_catalog, print_tables
from course_advisor.loader import CourseAdvisor
from course_advisor.report import format_course, format_course_list, format_summary

MENU = """  1. Load Data Structure.
  2. Print Course List.
  3. Print Course.
  4. Export to DuckDB.
  5. Print DuckDB Export.
  9. Exit
"""

HELP = """
Help:
1. Load Data Structure  - Read a course file and load courses into the catalog.
2. Print Course List    - Show all courses alphanumerically.
3. Print Course         - Enter a course number to see its title and prerequisites (with titles).
4. Export to DuckDB     - Write the loaded catalog to a DuckDB file.
5. Print DuckDB Export  - Show the tables of the last DuckDB export.
9. Exit                 - Quit the program.
Other: 'H' or '?' shows this help. Input is case-insensitive.
"""


def print_all(advisor):
    start = time.perf_counter()
    courses = advisor.list_all_sorted()
    ms = int((time.perf_counter() - start) * 1000)

    print("\nHere is a sample schedule:\n")
    print(format_course_list(courses))
    print(f"\n(List generated in {ms} ms)\n")


def handle_choice(advisor, read):
    """Runs one menu round. Returns False when the user asked to exit."""
    choice = read(MENU + "\nWhat would you like to do? ").strip()

    if choice == "1":
        path = read("Enter file name (e.g., courses.txt): ").strip()
        if not path:
            print("File name cannot be empty.\n")
            return True
        summary = advisor.load(path)
        print("\n" + format_summary(summary) + "\n")

    elif choice == "5":
        db_path = advisor.config.duckdb_path
        try:
            print_tables(db_path)
        except (OSError, duckdb.Error) as e:
            print(f"[ERROR] Could not read {db_path}: {e}\n")

    elif choice in ("2", "3", "4"):
        if not advisor.has_courses:
            print("Please load the data structure first (option 1).\n")
            return True
        if choice == "2":
            print_all(advisor)
        elif choice == "3":
            code = read("What course do you want to know about? (or press Enter to cancel): ").strip()
            if not code:
                print("(cancelled)\n")
                return True
            print(format_course(advisor.catalog, code) + "\n")
        else:
            db_path = advisor.config.duckdb_path
            try:
                counts = export_catalog(advisor.catalog, db_path)
            except (OSError, duckdb.Error) as e:
                print(f"[ERROR] Export to {db_path} failed: {e}\n")
                return True
            print(f"✅ Exported {counts['courses']} courses and {counts['prerequisites']} prerequisites to {db_path}\n")

    elif choice == "9":
        print("Thank you for using the course planner!")
        return False

    elif choice.lower() == "h" or choice == "?":
        print(HELP)

    else:
        print(f"{choice} is not a valid option.\n")
        print("Try: 1 (Load), 2 (List), 3 (Course), 4 (Export), 5 (Show export), 9 (Exit), or H for help.\n")
    return True


def run_menu(advisor, read=input):
    print("Welcome to the course planner.\n")
    while True:
        try:
            if not handle_choice(advisor, read):
                break
        except EOFError:
            break


def main(argv=None):
    parser = argparse.ArgumentParser(description="Load a course file and browse it.")
    parser.add_argument("--config", help="path to a JSON config file")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_menu(CourseAdvisor(config))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
