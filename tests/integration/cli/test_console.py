from __future__ import annotations

import pytest

from src.interfaces.cli import main as cli

ADD_ARGS = [
    "add",
    "11HHTYRSDG9Q",
    "--name",
    "Kaya",
    "--breed",
    "Mini spitz",
    "--type",
    "Mammal",
    "--age",
    "2",
    "--gender",
    "Female",
]


@pytest.fixture()
def db_args(tmp_path) -> list[str]:
    return ["--database-url", f"sqlite+aiosqlite:///{tmp_path / 'console.db'}"]


def test_console_add_list_search_and_delete(db_args, capsys):
    assert cli.main([*db_args, *ADD_ARGS]) == 0
    assert "Added 11HHTYRSDG9Q." in capsys.readouterr().out

    assert cli.main([*db_args, "list"]) == 0
    assert "11HHTYRSDG9Q | Kaya | Mini spitz | Mammal | 2 | Female | healthy" in (
        capsys.readouterr().out
    )

    assert cli.main([*db_args, "search", "Mammal"]) == 0
    assert "Kaya" in capsys.readouterr().out

    assert cli.main([*db_args, "delete", "11HHTYRSDG9Q"]) == 0
    capsys.readouterr()

    assert cli.main([*db_args, "get", "11HHTYRSDG9Q"]) == 1
    assert "No animal found with catalog number: 11HHTYRSDG9Q" in capsys.readouterr().err


def test_console_update_marks_animal_unhealthy(db_args, capsys):
    assert cli.main([*db_args, *ADD_ARGS]) == 0
    update_args = ["update", *ADD_ARGS[1:], "--unhealthy"]
    update_args[update_args.index("2")] = "3"
    assert cli.main([*db_args, *update_args]) == 0
    capsys.readouterr()

    assert cli.main([*db_args, "get", "11HHTYRSDG9Q"]) == 0
    assert "| 3 | Female | not healthy" in capsys.readouterr().out


def test_console_reports_invalid_animal(db_args, capsys):
    args = [*ADD_ARGS]
    args[1] = "11hhtyrsdg9q"
    assert cli.main([*db_args, *args]) == 1
    assert "Invalid animal!" in capsys.readouterr().err


def test_console_list_on_empty_catalog(db_args, capsys):
    assert cli.main([*db_args, "init-db"]) == 0
    assert "Database ready." in capsys.readouterr().out
    assert cli.main([*db_args, "list"]) == 1
    assert "No animal found." in capsys.readouterr().err
