import pytest

from techrot.stats import PrimaryStats, SecondaryStats


def test_primary_defaults():
    stats = PrimaryStats()
    assert [stats[i] for i in range(len(PrimaryStats.NAMES))] == [3] * 7


def test_secondary_defaults():
    stats = SecondaryStats()
    assert all(stats[i] == 10 for i in range(len(SecondaryStats.NAMES)))


def test_primary_name_and_index_agree():
    stats = PrimaryStats(strength=5, luck=9)
    assert stats["strength"] == stats[0] == 5
    assert stats["luck"] == stats[6] == 9


def test_primary_set_by_name_reads_by_index_and_attribute():
    stats = PrimaryStats()
    stats["agility"] = 8
    assert stats[5] == 8
    assert stats.agility == 8


def test_secondary_set_by_index_reads_by_name():
    stats = SecondaryStats()
    stats[11] = 4
    assert stats["kineticDrift"] == 4
    assert stats.kinetic_drift == 4


def test_secondary_camel_case_keys():
    stats = SecondaryStats(close_combat=7, synaptic_tolerance=2)
    assert stats["closeCombat"] == 7
    assert stats["synapticTolerance"] == 2


@pytest.mark.parametrize("key", [7, -1, 100])
def test_primary_bad_index(key):
    with pytest.raises(IndexError):
        PrimaryStats()[key]


@pytest.mark.parametrize("key", [12, -1])
def test_secondary_bad_index(key):
    with pytest.raises(IndexError):
        SecondaryStats()[key]


def test_bad_names_raise_key_error():
    with pytest.raises(KeyError):
        PrimaryStats()["Strength"]
    with pytest.raises(KeyError):
        SecondaryStats()["close_combat"]
    with pytest.raises(KeyError):
        PrimaryStats()["wisdom"] = 1


def test_primary_render_layout():
    lines = PrimaryStats().render().splitlines()
    assert len(lines) == len(PrimaryStats.NAMES) + 2
    assert lines[0] == "+----------------+--------+"
    assert lines[-1] == lines[0]
    assert lines[1] == "| Strength       |      3 |"
    assert all(len(line) == len(lines[0]) for line in lines)


def test_secondary_render_layout():
    lines = SecondaryStats().render().splitlines()
    assert len(lines) == len(SecondaryStats.NAMES) + 2
    assert lines[0] == "+------------------------+--------+"
    assert lines[-1] == lines[0]
    assert all(len(line) == len(lines[0]) for line in lines)
    for name, line in zip(SecondaryStats.NAMES, lines[1:-1]):
        assert line.startswith(f"| {name} ")


def test_render_reflects_changes():
    stats = PrimaryStats()
    stats["charisma"] = 42
    assert "| Charisma       |     42 |" in stats.render().splitlines()


def test_print_stats_writes_render(capsys):
    stats = SecondaryStats()
    stats.print_stats()
    assert capsys.readouterr().out == stats.render() + "\n"
    primary = PrimaryStats()
    primary.print_stats()
    assert capsys.readouterr().out == primary.render() + "\n"