from techrot.cli import main
from techrot.player import Player


def test_main_prints_new_character_sheet(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == Player().full_stats_table() + "\n"


def test_main_output_contains_header(capsys):
    main([])
    out = capsys.readouterr().out
    assert "|    PRIMARY STATS      |   SECONDARY STATS           |" in out
    assert "KineticDrift:" in out