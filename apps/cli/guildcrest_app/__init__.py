"""Command line front-end for guildcrest."""
