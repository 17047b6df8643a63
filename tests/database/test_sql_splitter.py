from pathlib import Path

from src.rental_admin.rental_admin.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use

REPO_ROOT = Path(__file__).resolve().parents[2]


def test_splits_on_semicolons_outside_quotes_and_skips_comments():
    sql = """
    -- demo; not a statement
    INSERT INTO t VALUES ('a;b', 'it\\'s'); -- trailing
    SELECT 1;
    """

    assert list(_iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b', 'it\\'s')", "SELECT 1"]


def test_create_database_and_use_are_removed():
    sql = "CREATE DATABASE IF NOT EXISTS x;\nUSE x;\nCREATE TABLE t (id INT);"

    assert list(_iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]


def test_shipped_scripts_split_into_statements():
    schema = _strip_create_db_and_use((REPO_ROOT / "database" / "schema.sql").read_text(encoding="utf-8"))
    statements = list(_iter_sql_statements(schema))

    tables = [s for s in statements if s.upper().startswith("CREATE TABLE")]
    assert len(tables) == 6
    assert not any(s.upper().startswith(("USE ", "CREATE DATABASE")) for s in statements)
