import pytest

from viagens_hash.chained_list import ChainedList, Viagem


@pytest.fixture
def filled():
    bucket = ChainedList()
    bucket.insert(Viagem("BELMAN", 100001))
    bucket.insert(Viagem("RIOPOR", 100002))
    bucket.insert(Viagem("BELMAN", 100003))
    return bucket


def test_new_list_is_empty():
    bucket = ChainedList()
    assert bucket.is_empty()
    assert len(bucket) == 0
    assert list(bucket) == []


def test_insert_places_newest_at_head(filled):
    assert [v.codigo for v in filled] == [100003, 100002, 100001]
    assert len(filled) == 3
    assert not filled.is_empty()


def test_find_returns_newest_matching_code(filled):
    assert filled.find("BELMAN") == 100003
    assert filled.find("RIOPOR") == 100002


def test_find_missing_returns_none(filled):
    assert filled.find("MACPAL") is None
    assert ChainedList().find("BELMAN") is None


def test_find_all_returns_matches_head_first(filled):
    assert filled.find_all("BELMAN") == [
        Viagem("BELMAN", 100003),
        Viagem("BELMAN", 100001),
    ]
    assert filled.find_all("MACPAL") == []


def test_remove_takes_first_match(filled):
    removed = filled.remove("BELMAN")
    assert removed == Viagem("BELMAN", 100003)
    assert len(filled) == 2
    assert filled.find("BELMAN") == 100001


def test_remove_missing_raises(filled):
    with pytest.raises(KeyError):
        filled.remove("MACPAL")
    assert len(filled) == 3


def test_remove_from_empty_raises():
    with pytest.raises(KeyError):
        ChainedList().remove("BELMAN")


def test_remove_pair_takes_exact_entry(filled):
    removed = filled.remove_pair("BELMAN", 100001)
    assert removed == Viagem("BELMAN", 100001)
    assert filled.find_all("BELMAN") == [Viagem("BELMAN", 100003)]


def test_remove_pair_wrong_code_raises(filled):
    with pytest.raises(KeyError):
        filled.remove_pair("BELMAN", 100002)
    assert len(filled) == 3


def test_remove_all_empties_list(filled):
    filled.remove("BELMAN")
    filled.remove("BELMAN")
    filled.remove("RIOPOR")
    assert filled.is_empty()


def test_format_lines(filled):
    assert filled.format_lines() == [
        "A chave BELMAN tem o codigo 100003",
        "A chave RIOPOR tem o codigo 100002",
        "A chave BELMAN tem o codigo 100001",
    ]


def test_iteration_is_a_snapshot(filled):
    seen = []
    for viagem in filled:
        seen.append(viagem)
        filled.remove_pair(viagem.chave, viagem.codigo)
    assert len(seen) == 3
    assert filled.is_empty()