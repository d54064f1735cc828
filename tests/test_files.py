from barstatus.files import cat, num_files, run_command


def test_cat_returns_first_line(tmp_path):
    path = tmp_path / "file"
    path.write_text("hello\nworld\n")
    assert cat(str(path)) == "hello"


def test_cat_line_without_newline(tmp_path):
    path = tmp_path / "file"
    path.write_text("single")
    assert cat(str(path)) == "single"


def test_cat_empty_file(tmp_path):
    path = tmp_path / "file"
    path.write_text("")
    assert cat(str(path)) is None


def test_cat_blank_line(tmp_path):
    path = tmp_path / "file"
    path.write_text("\nsecond\n")
    assert cat(str(path)) is None


def test_cat_missing_file(tmp_path):
    assert cat(str(tmp_path / "missing")) is None


def test_cat_long_line_is_truncated(tmp_path):
    path = tmp_path / "file"
    path.write_text("x" * 5000 + "\n")
    result = cat(str(path))
    assert result is not None and set(result) == {"x"}
    assert len(result) < 5000


def test_num_files_counts_entries(tmp_path):
    names = ["a", "b", ".hidden"]
    for name in names:
        (tmp_path / name).write_text("")
    (tmp_path / "sub").mkdir()
    assert num_files(str(tmp_path)) == str(len(names) + 1)


def test_num_files_empty_directory(tmp_path):
    assert num_files(str(tmp_path)) == "0"


def test_num_files_missing_directory(tmp_path):
    assert num_files(str(tmp_path / "missing")) is None


def test_run_command_output():
    assert run_command("echo foo") == "foo"


def test_run_command_first_line_only():
    assert run_command("printf 'a\\nb\\n'") == "a"


def test_run_command_no_output():
    assert run_command("true") is None