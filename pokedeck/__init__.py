"""pokedeck: a terminal catalog of saved PokeAPI entries.

Search the PokeAPI by id or name, preview the candidate, add it to a local
collection, and browse the collection as cards with a maskable speed stat.

Usage:
    python -m pokedeck list                # Show saved cards
    python -m pokedeck list --show         # Show saved cards with speed
    python -m pokedeck add pikachu         # Search and add
    python -m pokedeck remove 25           # Remove an entry
    python -m pokedeck shell               # Interactive session
"""
