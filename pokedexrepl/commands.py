"""The commands the Pokedex REPL understands, and the state they share."""

from __future__ import annotations

import random
import re
import sys
from dataclasses import dataclass, field
from typing import Callable, TextIO

from .client import ApiError, PokeApiClient
from .models import LocationPage, Pokemon

_PAGE_OFFSET = re.compile(r"offset=(\d+)")
_PAGE_SIZE = 20
_CATCH_THRESHOLD = 40


class CommandError(Exception):
    """A command was used wrongly or could not complete."""


@dataclass
class Config:
    """State carried from one command to the next during a session."""

    client: PokeApiClient | None = None
    caught_pokemon: dict[str, Pokemon] = field(default_factory=dict)
    next_location_url: str | None = None
    previous_location_url: str | None = None
    out: TextIO | None = None
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A REPL command: its name, help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[[Config, str], None]


def _say(config: Config, *parts: object) -> None:
    print(*parts, file=config.out if config.out is not None else sys.stdout)


def _api(config: Config) -> PokeApiClient:
    if config.client is None:
        raise CommandError("no API client configured")
    return config.client


def find_page_num(url: str | None) -> int:
    """Return the page number encoded by the ``offset`` query of ``url``."""
    if url is None:
        raise CommandError("no page URL to read a page number from")
    match = _PAGE_OFFSET.search(url)
    if match is None:
        raise CommandError(f"no page offset in {url!r}")
    return int(match.group(1)) // _PAGE_SIZE


def command_help(config: Config, param: str) -> None:
    """Print a welcome banner and every command with its description."""
    if param:
        _say(config, "Run 'help' without command parameter")
        return
    _say(config, "-----------------------")
    _say(config, "Welcome to Pokedex REPL")
    _say(config, "-----------------------")
    for command in get_commands().values():
        _say(config, command.name, command.description)


def command_exit(config: Config, param: str) -> None:
    """Leave the program."""
    if param:
        _say(config, "Run 'exit' without command parameter")
        return
    raise SystemExit(0)


def _show_locations(config: Config, page: LocationPage) -> None:
    config.next_location_url = page.next
    config.previous_location_url = page.previous
    _say(config, f"({find_page_num(config.next_location_url)})")
    for result in page.results:
        _say(config, result.name)


def command_map(config: Config, param: str) -> None:
    """Show the next page of location areas."""
    if param:
        _say(config, "Run 'map' without command parameter")
        return
    _show_locations(config, _api(config).get_locations(config.next_location_url))


def command_mapb(config: Config, param: str) -> None:
    """Show the previous page of location areas."""
    if param:
        _say(config, "Run 'mapb' without command parameter")
        return
    _show_locations(config, _api(config).get_locations(config.previous_location_url))


def command_explore(config: Config, param: str) -> None:
    """List the Pokemon that can be encountered in a location area."""
    if not param:
        raise CommandError("no command parameter entered for 'explore'")
    try:
        area = _api(config).get_encounters(param)
    except ApiError:
        _say(config, "Location not found")
        raise
    _say(config, f"Exploring {param}...")
    _say(config, "Found Pokemon:")
    for pokemon in area.pokemon:
        _say(config, " -", pokemon.name)


def command_catch(config: Config, param: str) -> None:
    """Throw a pokeball; the higher the base experience, the harder the catch."""
    if not param:
        raise CommandError("no command parameter entered for 'catch'")
    try:
        pokemon = _api(config).get_pokemon(param)
    except ApiError:
        _say(config, "Pokemon not found")
        raise
    _say(config, f"Throwing a pokeball at {pokemon.name}...")
    if pokemon.base_experience <= 0:
        raise CommandError(
            f"{pokemon.name} has no positive base experience to roll against"
        )
    if config.rng.randrange(pokemon.base_experience) <= _CATCH_THRESHOLD:
        _say(config, f"{pokemon.name} was CAUGHT! Adding {pokemon.name} to the pokedex.")
        config.caught_pokemon[pokemon.name] = pokemon
    else:
        _say(config, f"{pokemon.name} escaped!")


def command_inspect(config: Config, param: str) -> None:
    """Show the Pokedex entry of a caught Pokemon."""
    if not param:
        raise CommandError("no command parameter entered for 'inspect'")
    entry = config.caught_pokemon.get(param)
    if entry is None:
        try:
            pokemon = _api(config).get_pokemon(param)
        except ApiError:
            _say(config, "Pokemon not found")
            raise
        _say(config, f"You have not caught {pokemon.name} yet")
        return
    _say(config, f"Name: {entry.name}")
    _say(config, f"Height: {entry.height}")
    _say(config, f"Weight: {entry.weight}")
    _say(config, "Stats:")
    for stat in entry.stats:
        _say(config, f" - {stat.name}: {stat.base_stat}")
    _say(config, "Types:")
    for type_name in entry.types:
        _say(config, f" - {type_name}")


def command_pokedex(config: Config, param: str) -> None:
    """List every caught Pokemon."""
    if param:
        _say(config, "Run 'pokedex' without command parameter")
        return
    _say(config, "Your Pokedex:")
    for name in config.caught_pokemon:
        _say(config, " -", name)


def get_commands() -> dict[str, Command]:
    """Return every REPL command keyed by its name."""
    commands = (
        Command("help", "\t\tDisplays the help message", command_help),
        Command("exit", "\t\tExits the REPL program", command_exit),
        Command(
            "map",
            "\t\tWill display 20 location areas in the Pokemon world, with each "
            "subsequent call to `map` fetching the next 20",
            command_map,
        ),
        Command(
            "mapb",
            "\t\tStands for 'map back', does what map does but in reverse",
            command_mapb,
        ),
        Command(
            "explore",
            "\tRequires an input paramter of a location-area (can be found in a "
            "'map' command), returns a list of pokemon types",
            command_explore,
        ),
        Command(
            "catch",
            "\t\tAttempts to catch the pokemon with a pokeball, the higher the base "
            "experience the harder it is to catch",
            command_catch,
        ),
        Command(
            "inspect",
            "\tRequires an input parameter of a pokemon, view your pokedex entry on "
            "any pokemon that you have caught so far",
            command_inspect,
        ),
        Command("pokedex", "\tViews all the caught pokemon in your pokedex", command_pokedex),
    )
    return {command.name: command for command in commands}