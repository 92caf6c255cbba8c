"""Lineprobe subcommands."""
