from cuteopt import const, main


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out == f"cuteopt v{const.VERSION_STR}\n"


def test_main_echo(capsys):
    assert main(["--echo", "hello"]) == 0
    assert capsys.readouterr().out == "hello\n"

    assert main(["--echo="]) == 0
    assert capsys.readouterr().out == "\n"


def test_main_no_args(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_unknown_option(capsys):
    assert main(["--nope"]) == 1
    captured = capsys.readouterr()
    assert "Unrecognized option '--nope'" in captured.err
    assert captured.out.startswith("Usage: cuteopt")


def test_main_missing_value(capsys):
    assert main(["--echo"]) == 1
    assert "Expected value for option '--echo'" in capsys.readouterr().err
