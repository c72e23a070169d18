"""Tests for the command-line front end."""

from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from class_opener.cli import main
from class_opener.search_path import SEARCH_PATH_ENV


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A source root with a library class and a file that uses it."""
    monkeypatch.delenv(SEARCH_PATH_ENV, raising=False)
    lib = tmp_path / "lib" / "com" / "acme"
    lib.mkdir(parents=True)
    (lib / "Widget.java").write_text("package com.acme;\nclass Widget {}\n")
    (lib / "Gadget.java").write_text("package com.acme;\nclass Gadget {}\n")

    app = tmp_path / "app"
    app.mkdir()
    (app / "Main.java").write_text(
        "import com.acme.Widget;\n"
        "import com.acme.*;\n"
        "\n"
        "public class Main extends Gadget {\n"
        "    Widget w;\n"
        "}\n"
    )
    return tmp_path


def run(project: Path, *argv: str) -> int:
    """Invoke the CLI with no config file and the library root on the path."""
    return main(
        [
            "--config",
            str(project / "none.yml"),
            "--search-path",
            str(project / "lib"),
            *argv,
        ]
    )


def test_at_point_line_column(
    project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify opening the class under a LINE:COLUMN cursor."""
    assert run(project, "at-point", str(project / "app" / "Main.java"), "5:5") == 0
    out = capsys.readouterr().out.strip()
    assert out == f"Opened {project / 'lib' / 'com' / 'acme' / 'Widget.java'}"


def test_base_class(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify the base-class command resolves through a wildcard import."""
    assert run(project, "base-class", str(project / "app" / "Main.java")) == 0
    assert capsys.readouterr().out.strip().endswith("Gadget.java")


def test_import_at_point(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify the import-at-point command."""
    assert run(project, "import-at-point", str(project / "app" / "Main.java"), "0") == 0
    assert capsys.readouterr().out.strip().endswith("Widget.java")


def test_not_found_exits_with_message(project: Path) -> None:
    """Verify failures surface as SystemExit carrying the message."""
    main_java = project / "app" / "Main.java"
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(project / "none.yml"), "at-point", str(main_java), "5:5"])
    assert exc.value.code == "no import declaration found for class Widget"


def test_import_not_parsable(project: Path) -> None:
    """Verify a cursor off an import line is reported."""
    with pytest.raises(SystemExit) as exc:
        run(project, "import-at-point", str(project / "app" / "Main.java"), "4:1")
    assert "cannot parse import declaration" in str(exc.value.code)


def test_invalid_position(project: Path) -> None:
    """Verify malformed cursor positions are rejected."""
    with pytest.raises(SystemExit) as exc:
        run(project, "at-point", str(project / "app" / "Main.java"), "99:1")
    assert "Invalid cursor position" in str(exc.value.code)


def test_missing_file(project: Path) -> None:
    """Verify an unreadable buffer file is reported."""
    with pytest.raises(SystemExit) as exc:
        run(project, "base-class", str(project / "app" / "Absent.java"))
    assert "Cannot read" in str(exc.value.code)


def test_search_path_from_config_and_env(
    project: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify roots from the config file and the environment are used."""
    config_file = project / "config.yml"
    config_file.write_text(yaml.dump({"search_path": [str(project / "nowhere")]}))
    monkeypatch.setenv(SEARCH_PATH_ENV, str(project / "lib"))

    main_java = project / "app" / "Main.java"
    assert main(["--config", str(config_file), "at-point", str(main_java), "5:5"]) == 0
    assert capsys.readouterr().out.strip().endswith("Widget.java")


def test_editor_command_from_config(project: Path) -> None:
    """Verify the configured editor is launched with the resolved path."""
    config_file = project / "config.yml"
    config_file.write_text(yaml.dump({"editor": {"command": "myeditor --wait"}}))
    main_java = project / "app" / "Main.java"
    widget = project / "lib" / "com" / "acme" / "Widget.java"

    with patch("class_opener.file_system.subprocess.run") as mock_run:
        code = main(
            [
                "--config",
                str(config_file),
                "-s",
                str(project / "lib"),
                "at-point",
                str(main_java),
                "5:5",
            ]
        )

    assert code == 0
    mock_run.assert_called_once_with(["myeditor", "--wait", str(widget)], check=True)


def test_bad_config_section_exits_with_message(project: Path) -> None:
    """Verify a malformed config section is a one-line error, not a traceback."""
    config_file = project / "config.yml"
    config_file.write_text("language: java\n")
    main_java = project / "app" / "Main.java"

    with pytest.raises(SystemExit) as exc:
        main(["--config", str(config_file), "at-point", str(main_java), "5:5"])
    assert "Error loading configuration" in str(exc.value.code)
    assert "language" in str(exc.value.code)
