"""CLI subcommands for verrange."""
