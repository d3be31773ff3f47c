import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from langtour import cli
from langtour.core.records import Student
from langtour.core.report import plot_marks, roster
from langtour.demos import structs_demo, values_demo
from langtour.experiments import run_from_config

VALUES_OUT = [
    "Value of x: 10",
    "Value of x: Hello World",
    "500, 6.4, 1",
    "500, 6.4, 1",
    "Orange",
    "Apples",
    "Mango",
]

STRUCTS_OUT = [
    "Vector : 10, 20, 30",
    "Student : Student {",
    '    name: "Ram",',
    '    email: "ram@example.com",',
    "    age: 20,",
    "    marks: 75,",
    '    favourite_subject: "Physics",',
    "}",
    "Student {",
    '    name: "Vikram",',
    '    email: "vikram@example.com",',
    "    age: 20,",
    "    marks: 80,",
    '    favourite_subject: "Maths",',
    "}",
    "Marks: 80",
    "Names : Mahendra Dani, Vikram",
]


def test_values_demo_output(capsys):
    assert values_demo.main() == 0
    assert capsys.readouterr().out.splitlines() == VALUES_OUT


def test_values_demo_custom_array(capsys):
    values_demo.main(fruits=["Kiwi", "Plum"])
    assert capsys.readouterr().out.splitlines()[4:] == ["Kiwi", "Plum"]


def test_structs_demo_output(capsys):
    assert structs_demo.main() == 0
    assert capsys.readouterr().out.splitlines() == STRUCTS_OUT


def test_structs_demo_table(capsys):
    structs_demo.main(table=True)
    out = capsys.readouterr().out.splitlines()
    assert out[: len(STRUCTS_OUT)] == STRUCTS_OUT
    assert "favourite_subject" in out[len(STRUCTS_OUT)]
    assert len(out) == len(STRUCTS_OUT) + 4


def test_roster_columns():
    df = roster([Student.new("Ram", "ram@example.com", 20, 75, "Physics")])
    assert list(df.columns) == ["name", "email", "age", "marks", "favourite_subject"]
    assert df.loc[0, "marks"] == 75


def test_plot_marks_writes_pdf(tmp_path):
    out = plot_marks(
        [Student.new("Ram", "ram@example.com", 20, 75, "Physics")],
        str(tmp_path / "charts" / "marks.pdf"),
    )
    assert os.path.getsize(out) > 0


def test_plot_marks_empty():
    with pytest.raises(ValueError):
        plot_marks([], "unused.pdf")


def test_cli_values(capsys):
    assert cli.main(["values"]) == 0
    assert capsys.readouterr().out.splitlines() == VALUES_OUT


def test_cli_all_with_chart(capsys, tmp_path):
    assert cli.main(["all", "--outputs_dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[: len(VALUES_OUT)] == VALUES_OUT
    assert out[len(VALUES_OUT) : len(VALUES_OUT) + len(STRUCTS_OUT)] == STRUCTS_OUT
    assert out[-1] == f"Saved: {os.path.join(str(tmp_path), 'marks.pdf')}"


def test_cli_requires_command():
    with pytest.raises(SystemExit):
        cli.main([])


def test_run_from_config(tmp_path, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("demo: values\nverbose: true\nfruits: [Fig, Pear]\n", encoding="utf-8")
    assert run_from_config.main(["--config", str(cfg)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Running values with overrides: {'fruits': ['Fig', 'Pear']}"
    assert out[-2:] == ["Fig", "Pear"]


def test_run_from_config_structs_overrides(tmp_path, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text(
        "demo: structs\noverrides:\n  name: Asha\n  marks: 91\n", encoding="utf-8"
    )
    run_from_config.main(["--config", str(cfg)])
    out = capsys.readouterr().out.splitlines()
    assert "Marks: 91" in out
    # email untouched by the override, so it still comes from the source record
    assert '    email: "mahendra@example.com",' in out
    assert out[-1] == "Names : Mahendra Dani, Asha"


def test_run_from_config_unknown_demo(tmp_path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("demo: nope\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="Unknown demo: nope"):
        run_from_config.main(["--config", str(cfg)])


def test_run_from_config_rejects_non_mapping(tmp_path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("- values\n", encoding="utf-8")
    with pytest.raises(ValueError):
        run_from_config.main(["--config", str(cfg)])


def test_structs_demo_empty_overrides_clone_source(capsys):
    structs_demo.main(overrides={})
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "Names : Mahendra Dani, Mahendra Dani"
    assert "Marks: 98" in out


def test_structs_demo_explicit_records(capsys):
    structs_demo.main(
        student1={
            "name": "Asha",
            "email": "asha@example.com",
            "age": 19,
            "marks": 70,
            "favourite_subject": "Art",
        },
        overrides={"marks": 71},
        student3=["Lee", "lee@example.com", 21, 60, "Music"],
    )
    out = capsys.readouterr().out.splitlines()
    assert out[2] == '    name: "Lee",'
    assert "Marks: 71" in out
    assert out[-1] == "Names : Asha, Asha"


def test_plot_marks_same_name_gets_own_bar(tmp_path, monkeypatch):
    import matplotlib.pyplot as plt

    real_close = plt.close
    monkeypatch.setattr(plt, "close", lambda *a, **k: None)
    s1 = Student.new("Ram", "ram@example.com", 20, 98, "Physics")
    plot_marks([s1, s1.with_overrides(marks=91)], str(tmp_path / "marks.pdf"))

    ax = plt.gca()
    centers = [p.get_x() + p.get_width() / 2 for p in ax.patches]
    heights = [p.get_height() for p in ax.patches]
    labels = [t.get_text() for t in ax.get_xticklabels()]
    real_close("all")

    assert centers == pytest.approx([0.0, 1.0])
    assert heights == [98, 91]
    assert labels == ["Ram", "Ram"]


def test_run_from_config_missing_demo(tmp_path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("verbose: true\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="Missing 'demo' in config"):
        run_from_config.main(["--config", str(cfg)])
