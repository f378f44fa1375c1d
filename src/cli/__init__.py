"""Command-line front end for the laboratory."""
