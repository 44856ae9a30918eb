# pokedexrepl

An interactive command-line Pokedex. It pages through location areas from
the public PokeAPI, shows which Pokemon can be encountered in an area, lets
you throw pokeballs at them, and keeps the ones you catch in a Pokedex for
the length of the session. Raw API responses are cached in memory for three
minutes, so revisiting a page or a Pokemon within that time does not go to
the network again.

It uses only the Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

## Usage

Start the REPL:

```
pokedex
```

`pokedex --help` prints a short usage message; the command takes no other
options.

You get a `Pokedex >` prompt. Each line is lower-cased and split on
whitespace; the first word is the command and an optional second word is
its parameter. A line with more than two words is rejected with
"Too many inputs try again", and an unknown command is reported as invalid.

| Command             | What it does                                                                 |
|---------------------|------------------------------------------------------------------------------|
| `help`              | Prints a banner and every command with its description                       |
| `exit`              | Leaves the program                                                           |
| `map`               | Shows the next 20 location areas, preceded by the page number in brackets    |
| `mapb`              | Shows the previous 20 location areas                                         |
| `explore <area>`    | Lists the Pokemon that can be encountered in a location area                 |
| `catch <pokemon>`   | Throws a pokeball; the higher the base experience, the harder the catch      |
| `inspect <pokemon>` | Shows name, height, weight, stats and types of a Pokemon you have caught     |
| `pokedex`           | Lists every Pokemon caught so far                                            |

`help`, `exit`, `map`, `mapb` and `pokedex` take no parameter; given one,
they print a reminder and do nothing else. `explore`, `catch` and `inspect`
need one; without it they print nothing. When the API has no such area or
Pokemon, `explore` prints "Location not found" and `catch` and `inspect`
print "Pokemon not found". `inspect` on a Pokemon that exists but is not in
your Pokedex says you have not caught it yet.

A catch succeeds when a random number drawn from `0` up to (but not
including) the Pokemon's base experience is at most 40.

Example session (output abridged):

```
Pokedex > map
(1)
canalave-city-area
eterna-city-area
...

Pokedex > explore canalave-city-area
Exploring canalave-city-area...
Found Pokemon:
 - tentacool
 - tentacruel
...

Pokedex > catch tentacool
Throwing a pokeball at tentacool...
tentacool was CAUGHT! Adding tentacool to the pokedex.

Pokedex > pokedex
Your Pokedex:
 - tentacool
```

The session ends on `exit` or at end of input (Ctrl-D).

## Using it from Python

- `pokedexrepl.cache.Cache(ttl)` — a thread-safe in-memory cache of byte
  payloads. `add(key, value)` stores, `get(key)` returns the payload or
  `None`, `reap()` drops entries older than `ttl` seconds and returns how
  many it removed. A background thread calls `reap()` every `ttl` seconds
  until `close()` is called; the cache is also a context manager, and
  `len()` gives the number of entries.
- `pokedexrepl.models` — frozen dataclasses built from API JSON with
  `from_dict`: `NamedResource`, `LocationPage`, `LocationArea`,
  `PokemonStat` and `Pokemon`.
- `pokedexrepl.client.PokeApiClient(http_timeout, cache_ttl)` —
  `get_locations(url=None)`, `get_encounters(location)` and
  `get_pokemon(name)` fetch and parse documents, caching the raw bodies.
  Any failure (network error, status above 299, bad JSON, unexpected
  document) raises `pokedexrepl.client.ApiError`, whose `status` holds the
  HTTP status when there was one. `close()` stops the cache's sweeper; the
  client is also a context manager.
- `pokedexrepl.commands` — `get_commands()` returns the command table as
  `Command` objects keyed by name; `Config` holds the session state (client,
  caught Pokemon, paging URLs, output stream and random generator). The
  `command_*` functions raise `CommandError` when misused; `find_page_num(url)`
  reads the page number from a URL's `offset` query.
- `pokedexrepl.repl.start_repl(config, stdin=None, stdout=None)` — runs the
  loop on any pair of text streams, creating an API client if `config` has
  none. `clean_input(text)` is the line splitter it uses, and `main()` is
  what the `pokedex` command runs.

## What it does not do

The Pokedex lives only in memory: caught Pokemon are not saved anywhere and
are gone when the session ends. The response cache is in memory too.

## Running the tests

```
pip install .[test]
pytest
```