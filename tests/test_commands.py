import io

import pytest

from pokedexrepl.client import ApiError
from pokedexrepl.commands import (
    Command,
    CommandError,
    Config,
    command_catch,
    command_exit,
    command_explore,
    command_help,
    command_inspect,
    command_map,
    command_mapb,
    command_pokedex,
    find_page_num,
    get_commands,
)
from pokedexrepl.models import LocationArea, LocationPage, NamedResource, Pokemon, PokemonStat

BASE = "https://pokeapi.co/api/v2/location-area/"
PAGE2 = BASE + "?offset=20&limit=20"
PAGE3 = BASE + "?offset=40&limit=20"


class FakeClient:
    def __init__(self, pages=None, areas=None, pokemon=None):
        self.pages = pages or {}
        self.areas = areas or {}
        self.pokemon = pokemon or {}
        self.location_calls = []

    def get_locations(self, url=None):
        self.location_calls.append(url)
        try:
            return self.pages[url]
        except KeyError:
            raise ApiError("Returned Invalid Status Code: 404 Not Found", 404) from None

    def get_encounters(self, location):
        try:
            return self.areas[location]
        except KeyError:
            raise ApiError("Returned Invalid Status Code: 404 Not Found", 404) from None

    def get_pokemon(self, name):
        try:
            return self.pokemon[name]
        except KeyError:
            raise ApiError("Returned Invalid Status Code: 404 Not Found", 404) from None


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.bounds = []

    def randrange(self, stop):
        self.bounds.append(stop)
        return self.value


PIKACHU = Pokemon(
    id=25,
    name="pikachu",
    base_experience=112,
    height=4,
    weight=60,
    stats=(PokemonStat(name="hp", base_stat=35, effort=0),),
    types=("electric",),
)


def make_config(client=None, rng=None):
    config = Config(client=client if client is not None else FakeClient(), out=io.StringIO())
    if rng is not None:
        config.rng = rng
    return config


def output(config):
    return config.out.getvalue()


def test_get_commands_names_match_keys():
    commands = get_commands()
    assert set(commands) == {
        "help", "exit", "map", "mapb", "explore", "catch", "inspect", "pokedex",
    }
    assert all(isinstance(c, Command) and c.name == key for key, c in commands.items())


def test_get_commands_callbacks():
    commands = get_commands()
    assert commands["map"].callback is command_map
    assert commands["mapb"].callback is command_mapb
    assert commands["catch"].callback is command_catch


def test_find_page_num():
    assert find_page_num(PAGE2) == 1
    assert find_page_num(BASE + "?offset=0&limit=20") == 0


def test_find_page_num_errors():
    with pytest.raises(CommandError):
        find_page_num(None)
    with pytest.raises(CommandError):
        find_page_num(BASE)


def test_help_lists_every_command():
    config = make_config()
    command_help(config, "")
    text = output(config)
    assert "Welcome to Pokedex REPL" in text
    for name, command in get_commands().items():
        assert f"{name} {command.description}" in text


def test_help_rejects_parameter():
    config = make_config()
    command_help(config, "x")
    assert output(config) == "Run 'help' without command parameter\n"


def test_exit_raises_system_exit():
    with pytest.raises(SystemExit) as info:
        command_exit(make_config(), "")
    assert info.value.code == 0


def test_exit_with_parameter_does_not_exit():
    config = make_config()
    command_exit(config, "now")
    assert output(config) == "Run 'exit' without command parameter\n"


def test_map_then_mapb():
    first = LocationPage(count=3, next=PAGE2, previous=None,
                         results=(NamedResource("canalave-city-area", ""),))
    second = LocationPage(count=3, next=PAGE3, previous=BASE + "?offset=0&limit=20",
                          results=(NamedResource("eterna-city-area", ""),))
    pages = {None: first, PAGE2: second, BASE + "?offset=0&limit=20": first}
    client = FakeClient(pages=pages)
    config = make_config(client)

    command_map(config, "")
    assert output(config) == "(1)\ncanalave-city-area\n"
    assert config.next_location_url == PAGE2
    assert config.previous_location_url is None

    command_map(config, "")
    assert config.next_location_url == PAGE3
    assert "eterna-city-area" in output(config)

    command_mapb(config, "")
    assert client.location_calls == [None, PAGE2, BASE + "?offset=0&limit=20"]
    assert config.next_location_url == PAGE2


def test_map_last_page_has_no_page_number():
    last = LocationPage(count=1, next=None, previous=None, results=(NamedResource("x", ""),))
    config = make_config(FakeClient(pages={None: last}))
    with pytest.raises(CommandError):
        command_map(config, "")
    assert config.next_location_url is None


def test_map_and_mapb_reject_parameter():
    config = make_config()
    command_map(config, "x")
    command_mapb(config, "x")
    assert output(config) == (
        "Run 'map' without command parameter\nRun 'mapb' without command parameter\n"
    )


def test_map_propagates_api_error():
    with pytest.raises(ApiError):
        command_map(make_config(FakeClient()), "")


def test_explore_lists_pokemon():
    area = LocationArea(name="pastoria-city-area",
                        pokemon=(NamedResource("tentacool", ""), NamedResource("magikarp", "")))
    config = make_config(FakeClient(areas={"pastoria-city-area": area}))
    command_explore(config, "pastoria-city-area")
    assert output(config) == (
        "Exploring pastoria-city-area...\nFound Pokemon:\n - tentacool\n - magikarp\n"
    )


def test_explore_errors():
    config = make_config()
    with pytest.raises(CommandError):
        command_explore(config, "")
    with pytest.raises(ApiError):
        command_explore(config, "nowhere")
    assert output(config) == "Location not found\n"


def test_catch_success_adds_to_pokedex():
    rng = FixedRng(40)
    config = make_config(FakeClient(pokemon={"pikachu": PIKACHU}), rng)
    command_catch(config, "pikachu")
    assert config.caught_pokemon == {"pikachu": PIKACHU}
    assert rng.bounds == [PIKACHU.base_experience]
    assert "pikachu was CAUGHT! Adding pikachu to the pokedex." in output(config)


def test_catch_escape():
    config = make_config(FakeClient(pokemon={"pikachu": PIKACHU}), FixedRng(41))
    command_catch(config, "pikachu")
    assert config.caught_pokemon == {}
    assert output(config) == "Throwing a pokeball at pikachu...\npikachu escaped!\n"


def test_catch_errors():
    config = make_config(FakeClient(pokemon={"ghost": Pokemon(name="ghost")}))
    with pytest.raises(CommandError):
        command_catch(config, "")
    with pytest.raises(CommandError):
        command_catch(config, "ghost")
    with pytest.raises(ApiError):
        command_catch(config, "missingno")
    assert "Pokemon not found" in output(config)


def test_inspect_caught():
    config = make_config()
    config.caught_pokemon["pikachu"] = PIKACHU
    command_inspect(config, "pikachu")
    assert output(config) == (
        "Name: pikachu\nHeight: 4\nWeight: 60\nStats:\n - hp: 35\nTypes:\n - electric\n"
    )


def test_inspect_not_caught():
    config = make_config(FakeClient(pokemon={"pikachu": PIKACHU}))
    command_inspect(config, "pikachu")
    assert output(config) == "You have not caught pikachu yet\n"


def test_inspect_errors():
    config = make_config()
    with pytest.raises(CommandError):
        command_inspect(config, "")
    with pytest.raises(ApiError):
        command_inspect(config, "missingno")
    assert output(config) == "Pokemon not found\n"


def test_pokedex_lists_caught():
    config = make_config()
    config.caught_pokemon["pikachu"] = PIKACHU
    config.caught_pokemon["eevee"] = Pokemon(name="eevee")
    command_pokedex(config, "")
    assert output(config) == "Your Pokedex:\n - pikachu\n - eevee\n"


def test_pokedex_rejects_parameter():
    config = make_config()
    command_pokedex(config, "all")
    assert output(config) == "Run 'pokedex' without command parameter\n"


def test_commands_without_client_raise():
    config = Config(out=io.StringIO())
    with pytest.raises(CommandError):
        command_map(config, "")