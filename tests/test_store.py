from lobby.models import Game, generate_game_id
from lobby.store import MemoryGameStore


def make_game(game_id, name='Chess', creator='alice'):
    return Game(id=game_id, name=name, creator=creator)


def test_append_keeps_order():
    store = MemoryGameStore()
    store.append(make_game('1'))
    store.append(make_game('2', name='Go'))
    assert [g.id for g in store.list()] == ['1', '2']


def test_list_returns_a_copy():
    store = MemoryGameStore([make_game('1')])
    store.list().clear()
    assert len(store) == 1


def test_remove_by_id_removes_first_match_only():
    store = MemoryGameStore()
    store.append(make_game('1', name='first'))
    store.append(make_game('1', name='second'))
    removed = store.remove_by_id('1')
    assert removed.name == 'first'
    assert [g.name for g in store.list()] == ['second']


def test_remove_missing_id():
    store = MemoryGameStore([make_game('1')])
    assert store.remove_by_id('nope') is None
    assert len(store) == 1


def test_find():
    game = make_game('1')
    store = MemoryGameStore([game])
    assert store.find('1') is game
    assert store.find('2') is None


def test_game_defaults_players_to_creator():
    game = make_game('1', creator='bob')
    assert game.players == ['bob']
    assert game.to_dict()['players'] == ['bob']


def test_generate_game_id_skips_ids_in_use(monkeypatch):
    ticks = iter([1_000_000_000, 1_000_000_000, 2_000_000_000])
    monkeypatch.setattr('lobby.models.time.time_ns', lambda: next(ticks))
    monkeypatch.setattr('lobby.models.time.sleep', lambda seconds: None)
    store = MemoryGameStore([make_game('1000')])
    assert generate_game_id(store) == '2000'
