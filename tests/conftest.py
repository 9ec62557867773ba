"""Shared fixtures for cardparsing tests."""

import sys
from pathlib import Path

import pytest

from sample_statements import BOA_STATEMENT, CHASE_STATEMENT, NO_DUE_DATE_STATEMENT

# Stands in for pdftotext: prints the "PDF" (a text file) to stdout and
# fails for files ending in .bad.
FAKE_PDFTOTEXT = """#!{python}
import sys
from pathlib import Path

path = Path(sys.argv[2])
if path.suffix == ".bad":
    sys.stderr.write("Syntax Error: Couldn't read xref table\\n")
    sys.exit(1)
sys.stdout.write(path.read_text(encoding="utf-8"))
"""


@pytest.fixture
def fake_pdftotext(tmp_path: Path) -> Path:
    """Executable that behaves like `pdftotext -raw FILE -` for text files."""
    script = tmp_path / "fake_pdftotext"
    script.write_text(FAKE_PDFTOTEXT.format(python=sys.executable), encoding="utf-8")
    script.chmod(0o755)
    return script


@pytest.fixture
def statement_files(tmp_path: Path) -> dict[str, Path]:
    files = {
        "chase": tmp_path / "chase.pdf",
        "boa": tmp_path / "boa.pdf",
        "no_due_date": tmp_path / "unknown.pdf",
        "broken": tmp_path / "broken.bad",
    }
    files["chase"].write_text(CHASE_STATEMENT, encoding="utf-8")
    files["boa"].write_text(BOA_STATEMENT, encoding="utf-8")
    files["no_due_date"].write_text(NO_DUE_DATE_STATEMENT, encoding="utf-8")
    files["broken"].write_text("", encoding="utf-8")
    return files
