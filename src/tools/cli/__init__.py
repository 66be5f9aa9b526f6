"""Command line front-ends."""
