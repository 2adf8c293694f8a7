"""Application layer - services orchestrating repositories and the domain."""
