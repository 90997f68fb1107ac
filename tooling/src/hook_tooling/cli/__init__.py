"""hooktool command-line entry points."""
