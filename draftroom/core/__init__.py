"""Core domain: positions, players, teams, scoring and the player catalog."""
