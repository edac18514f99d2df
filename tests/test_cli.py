from solong import errors
from solong.cli import main
from solong.mapfile import NO_ARGUMENT, TOO_MANY_ARGUMENTS, WRONG_EXTENSION


def _write(path, text):
    path.write_text(text)
    return str(path)


def test_no_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == NO_ARGUMENT


def test_too_many_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 1
    assert capsys.readouterr().out == TOO_MANY_ARGUMENTS


def test_wrong_extension(capsys):
    assert main(["map.txt"]) == 1
    assert capsys.readouterr().out == WRONG_EXTENSION


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ber")]) == 1
    assert capsys.readouterr().out == errors.OPEN_FILE


def test_map_without_collectable(tmp_path, capsys):
    path = _write(tmp_path / "map.ber", "11111\n1P0E1\n11111\n")
    assert main([path]) == 1
    assert capsys.readouterr().out == errors.COLLECTABLE


def test_empty_line_in_map(tmp_path, capsys):
    path = _write(tmp_path / "map.ber", "11111\n\n1PCE1\n11111\n")
    assert main([path]) == 1
    assert capsys.readouterr().out == errors.EMPTY_LINE


def test_valid_map_without_sprites(tmp_path, monkeypatch, capsys):
    path = _write(tmp_path / "map.ber", "11111\n1PCE1\n11111\n")
    monkeypatch.chdir(tmp_path)
    assert main([path]) == 1
    assert capsys.readouterr().out == errors.TEXTURE_ERROR


def test_enemy_rejected_without_bonus(tmp_path, capsys):
    path = _write(tmp_path / "map.ber", "111111\n1VPCE1\n111111\n")
    assert main([path]) == 1
    assert capsys.readouterr().out == errors.BAD_CHAR


def test_enemy_accepted_with_bonus(tmp_path, monkeypatch, capsys):
    path = _write(tmp_path / "map.ber", "111111\n1VPCE1\n111111\n")
    monkeypatch.chdir(tmp_path)
    assert main(["--bonus", path]) == 1
    assert capsys.readouterr().out == errors.TEXTURE_ERROR


def test_bonus_flag_alone_counts_as_no_argument(capsys):
    assert main(["--bonus"]) == 1
    assert capsys.readouterr().out == NO_ARGUMENT