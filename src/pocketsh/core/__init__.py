"""Core: configuration, session state, aliases, history, environment."""
