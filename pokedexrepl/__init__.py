"""Interactive command-line Pokedex backed by the PokeAPI, with a response cache."""

__version__ = "0.1.0"

__all__ = ["__version__"]