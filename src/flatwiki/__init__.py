"""FlatWiki - a minimal personal wiki backed by flat text files."""
