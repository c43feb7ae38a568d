"""Everything around the tini core: error reporting, sessions and the interactive shell."""
